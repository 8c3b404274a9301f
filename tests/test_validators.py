from django.test import SimpleTestCase

from momoapi.exceptions import ValidationError
from momoapi.utils.validators import (
    FieldError, parse_amount, validate_collections, validate_disbursements
)

from .fakes import payment, transfer


def error_fields(result):
    assert not result.ok
    return result.error.fields


class CollectionsValidationTests(SimpleTestCase):
    def test_valid_request_is_returned_unchanged(self):
        body = payment()
        result = validate_collections(body)

        self.assertTrue(result.ok)
        self.assertIs(result.value, body)
        self.assertEqual(body, payment())

    def test_minimal_request_without_messages_is_valid(self):
        body = {
            'amount': '100',
            'currency': 'UGX',
            'externalId': '123',
            'payer': {'partyIdType': 'MSISDN', 'partyId': '256784123456'},
        }
        result = validate_collections(body)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, body)

    def test_empty_body_yields_single_body_error(self):
        for body in ({}, None):
            result = validate_collections(body)
            self.assertIsInstance(result.error, ValidationError)
            self.assertEqual(len(result.error.errors), 1)
            error = result.error.errors[0]
            self.assertEqual(error.field, 'body')
            self.assertEqual(error.message, "Request body cannot be empty")

    def test_non_mapping_body_is_rejected(self):
        result = validate_collections(["amount", "100"])
        self.assertEqual(error_fields(result), ['body'])

    def test_missing_required_fields(self):
        fields = error_fields(validate_collections({'currency': 'UGX'}))

        self.assertIn('amount', fields)
        self.assertIn('externalId', fields)
        self.assertIn('payer', fields)
        self.assertNotIn('currency', fields)

    def test_missing_field_message(self):
        result = validate_collections({'currency': 'UGX'})
        messages = {e.field: e.message for e in result.error.errors}
        self.assertEqual(messages['amount'], "amount is required")
        self.assertEqual(messages['payer'], "payer is required")

    def test_empty_amount_with_missing_fields(self):
        result = validate_collections({'amount': '', 'currency': 'UGX'})
        errors = {e.field: e for e in result.error.errors}

        self.assertEqual(errors['amount'].message, "amount cannot be empty")
        self.assertEqual(errors['amount'].value, '')
        self.assertIn('externalId', errors)
        self.assertIn('payer', errors)
        # An empty amount is reported once, not also as an invalid number
        self.assertEqual([e.field for e in result.error.errors].count('amount'), 1)

    def test_empty_required_fields(self):
        result = validate_collections({
            'amount': '',
            'currency': '',
            'externalId': '',
            'payer': {},
        })
        fields = error_fields(result)

        self.assertIn('amount', fields)
        self.assertIn('currency', fields)
        self.assertIn('externalId', fields)
        self.assertIn('payer.partyIdType', fields)
        self.assertIn('payer.partyId', fields)

    def test_errors_follow_rule_order(self):
        result = validate_collections({
            'amount': 'abc',
            'currency': 'ugx',
            'externalId': 42,
            'payer': {'partyIdType': 'MSISDN', 'partyId': 'abc'},
            'payerMessage': 'x' * 200,
        })
        self.assertEqual(
            error_fields(result),
            ['amount', 'currency', 'externalId', 'payer.partyId', 'payerMessage']
        )

    def test_invalid_amounts(self):
        for amount in ["0", "-10", "abc", "10.5.5", "NaN", "Infinity", "1_000", " 10",
                       "100\n", "\u0661\u0660\u0660", "1e", "0e5"]:
            with self.subTest(amount=amount):
                self.assertIn('amount', error_fields(validate_collections(payment(amount=amount))))

    def test_amount_messages(self):
        cases = {
            "abc": "amount must be a valid number",
            "0": "amount must be positive",
            "-5": "amount must be positive",
        }
        for amount, message in cases.items():
            with self.subTest(amount=amount):
                result = validate_collections(payment(amount=amount))
                self.assertEqual(result.error.errors[0].message, message)

    def test_non_string_amount(self):
        result = validate_collections(payment(amount=100))
        self.assertEqual(result.error.errors, [FieldError('amount', "amount must be a string", 100)])

    def test_valid_amounts(self):
        for amount in ["1", "100", "1000.50", "0.01", "1e3", "2.5E2"]:
            with self.subTest(amount=amount):
                self.assertTrue(validate_collections(payment(amount=amount)).ok)

    def test_parse_amount(self):
        self.assertEqual(str(parse_amount("1000.50")), "1000.50")
        self.assertEqual(parse_amount("1e3"), 1000)
        self.assertIsNone(parse_amount("1000\n"))
        self.assertIsNone(parse_amount(""))

    def test_invalid_currencies(self):
        for currency in ["ug", "UGXX", "123", "ugx", 840, "UGX\n", "\nUGX"]:
            with self.subTest(currency=currency):
                result = validate_collections(payment(currency=currency))
                self.assertEqual(error_fields(result), ['currency'])
                self.assertEqual(result.error.errors[0].message, "currency must be a 3-letter ISO code")

    def test_valid_currencies(self):
        for currency in ["UGX", "EUR", "USD"]:
            with self.subTest(currency=currency):
                self.assertTrue(validate_collections(payment(currency=currency)).ok)

    def test_external_id_must_be_string(self):
        result = validate_collections(payment(externalId=123))
        self.assertEqual(result.error.errors[0].message, "externalId must be a string")

    def test_missing_party_id(self):
        result = validate_collections(payment(payer={'partyIdType': 'MSISDN'}))
        self.assertEqual(error_fields(result), ['payer.partyId'])

    def test_invalid_party_id_type_names_allowed_values(self):
        result = validate_collections(payment(payer={'partyIdType': 'INVALID', 'partyId': '123456789'}))

        self.assertEqual(error_fields(result), ['payer.partyIdType'])
        message = result.error.errors[0].message
        for allowed in ('MSISDN', 'EMAIL', 'PARTY_CODE'):
            self.assertIn(allowed, message)

    def test_payer_must_be_an_object(self):
        result = validate_collections(payment(payer='256784123456'))
        self.assertEqual(error_fields(result), ['payer'])

    def test_party_id_must_be_string(self):
        result = validate_collections(payment(payer={'partyIdType': 'MSISDN', 'partyId': 256784123456}))
        self.assertEqual(result.error.errors[0].message, "payer.partyId must be a string")

    def test_msisdn_format(self):
        for msisdn in ["256784123456", "+256784123456", "46733123450"]:
            with self.subTest(msisdn=msisdn):
                body = payment(payer={'partyIdType': 'MSISDN', 'partyId': msisdn})
                self.assertTrue(validate_collections(body).ok)

        for msisdn in ["abc", "123456789", "1234567890123456", "256-784-123456",
                       "256784123456\n", "\u0662\u0665\u0666784123456"]:
            with self.subTest(msisdn=msisdn):
                body = payment(payer={'partyIdType': 'MSISDN', 'partyId': msisdn})
                self.assertEqual(error_fields(validate_collections(body)), ['payer.partyId'])

    def test_email_format(self):
        invalid = payment(payer={'partyIdType': 'EMAIL', 'partyId': 'invalid-email'})
        self.assertEqual(error_fields(validate_collections(invalid)), ['payer.partyId'])

        valid = payment(payer={'partyIdType': 'EMAIL', 'partyId': 'user@example.com'})
        self.assertTrue(validate_collections(valid).ok)

    def test_message_length(self):
        long_message = "a" * 161
        self.assertEqual(
            error_fields(validate_collections(payment(payerMessage=long_message))),
            ['payerMessage']
        )
        self.assertEqual(
            error_fields(validate_collections(payment(payeeNote=long_message))),
            ['payeeNote']
        )
        self.assertTrue(validate_collections(payment(payerMessage="a" * 160)).ok)

    def test_message_length_counts_bytes(self):
        # 80 two-byte characters fit, 81 do not
        self.assertTrue(validate_collections(payment(payerMessage="é" * 80)).ok)
        self.assertFalse(validate_collections(payment(payerMessage="é" * 81)).ok)

    def test_message_must_be_string(self):
        result = validate_collections(payment(payeeNote=42))
        self.assertEqual(result.error.errors[0].message, "payeeNote must be a string")

    def test_errors_carry_field_message_and_value(self):
        result = validate_collections({'amount': 'invalid', 'currency': 'xyz'})

        for error in result.error.errors:
            self.assertIsInstance(error, FieldError)
            self.assertIsInstance(error.field, str)
            self.assertIsInstance(error.message, str)
        values = {e.field: e.value for e in result.error.errors}
        self.assertEqual(values['amount'], 'invalid')
        self.assertEqual(values['currency'], 'xyz')

    def test_validation_is_deterministic(self):
        body = {'amount': '-1', 'currency': 'x', 'payer': {'partyIdType': 'BAD'}}
        self.assertEqual(
            validate_collections(body).error.errors,
            validate_collections(body).error.errors
        )


class DisbursementsValidationTests(SimpleTestCase):
    def test_valid_request_is_returned_unchanged(self):
        body = transfer()
        result = validate_disbursements(body)
        self.assertIs(result.value, body)

    def test_missing_payee(self):
        body = transfer()
        del body['payee']
        self.assertIn('payee', error_fields(validate_disbursements(body)))

    def test_payer_does_not_satisfy_payee(self):
        self.assertIn('payee', error_fields(validate_disbursements(payment())))

    def test_payee_rules_match_payer_rules(self):
        body = transfer(payee={'partyIdType': 'INVALID', 'partyId': '123456789'})
        self.assertEqual(error_fields(validate_disbursements(body)), ['payee.partyIdType'])

        body = transfer(payee={'partyIdType': 'EMAIL', 'partyId': 'recipient@example.com'})
        self.assertTrue(validate_disbursements(body).ok)

    def test_party_code_has_no_format_check(self):
        body = transfer(payee={'partyIdType': 'PARTY_CODE', 'partyId': 'SOME_CODE_123'})
        self.assertTrue(validate_disbursements(body).ok)
