from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings

from momoapi.exceptions import APIError, ValidationError
from momoapi.result import Err, Ok
from momoapi.utils.validators import FieldError

SERVICE = "momoapi.management.commands.momo_test_payment.CollectionService"


class MomoTestPaymentCommandTests(SimpleTestCase):
    def run_command(self, *args):
        out = StringIO()
        call_command("momo_test_payment", *args, stdout=out)
        return out.getvalue()

    @mock.patch(SERVICE)
    def test_requests_payment_and_prints_reference(self, mocked_service):
        service = mocked_service.return_value
        service.request_to_pay.return_value = Ok("0b7e9d5c-1a2b-4c3d-8e9f-001122334455")

        output = self.run_command("--phone", "256784123456", "--amount", "100", "--reference", "ORDER-1")

        self.assertIn("0b7e9d5c-1a2b-4c3d-8e9f-001122334455", output)
        config, body = service.request_to_pay.call_args.args
        self.assertEqual(config.subscription_key, "settings_subscription_key")
        self.assertEqual(body["externalId"], "ORDER-1")
        self.assertEqual(body["currency"], "EUR")
        self.assertEqual(body["payer"], {"partyIdType": "MSISDN", "partyId": "256784123456"})

    @mock.patch(SERVICE)
    def test_failed_payment_raises_command_error(self, mocked_service):
        mocked_service.return_value.request_to_pay.return_value = Err(APIError(500, {"message": "down"}))

        with self.assertRaisesMessage(CommandError, "request_failed"):
            self.run_command("--phone", "256784123456", "--amount", "100")

    @mock.patch(SERVICE)
    def test_validation_errors_are_listed(self, mocked_service):
        mocked_service.return_value.request_to_pay.return_value = Err(ValidationError([
            FieldError("amount", "amount must be positive", "0")
        ]))

        with self.assertRaisesMessage(CommandError, "amount: amount must be positive"):
            self.run_command("--phone", "256784123456", "--amount", "0")

    @mock.patch(SERVICE)
    def test_status_only(self, mocked_service):
        service = mocked_service.return_value
        service.get_transaction_status.return_value = Ok({
            "status": "SUCCESSFUL", "amount": "100", "currency": "EUR"
        })

        output = self.run_command("--status", "ref-1")

        self.assertIn("SUCCESSFUL", output)
        self.assertIn("EUR 100.00", output)
        service.request_to_pay.assert_not_called()

    @mock.patch(SERVICE)
    def test_check_balance(self, mocked_service):
        service = mocked_service.return_value
        service.get_balance.return_value = Ok({"availableBalance": "1500", "currency": "EUR"})
        service.get_transaction_status.return_value = Ok({"status": "PENDING"})

        output = self.run_command("--check-balance", "--status", "ref-1")

        self.assertIn("EUR 1,500.00", output)

    def test_phone_and_amount_required(self):
        with self.assertRaises(CommandError):
            self.run_command("--amount", "100")

    @override_settings(MOMO_API_KEY="")
    def test_missing_credentials(self):
        with self.assertRaisesMessage(CommandError, "MOMO_API_KEY"):
            self.run_command("--status", "ref-1")
