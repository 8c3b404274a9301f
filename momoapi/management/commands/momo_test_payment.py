"""
Management command to test MoMo collection functionality against the sandbox.
"""

import uuid

from django.core.management.base import BaseCommand, CommandError

from momoapi.config import MomoConfig
from momoapi.constants import TransactionStatus
from momoapi.exceptions import ConfigurationError, ValidationError
from momoapi.services.collection_service import CollectionService
from momoapi.utils.formatters import format_currency, mask_party_id


class Command(BaseCommand):
    help = 'Test MTN MoMo request-to-pay functionality'

    def add_arguments(self, parser):
        parser.add_argument(
            '--phone',
            type=str,
            help='Payer MSISDN (e.g., 256784123456)'
        )
        parser.add_argument(
            '--amount',
            type=str,
            help='Payment amount (e.g., 100)'
        )
        parser.add_argument(
            '--currency',
            type=str,
            default='EUR',
            help='Currency code (default: EUR, the sandbox currency)'
        )
        parser.add_argument(
            '--reference',
            type=str,
            help='External id (auto-generated if not provided)'
        )
        parser.add_argument(
            '--status',
            type=str,
            metavar='REFERENCE_ID',
            help='Only check the status of an earlier request'
        )
        parser.add_argument(
            '--check-balance',
            action='store_true',
            help='Check collection account balance first'
        )

    def handle(self, *args, **options):
        try:
            config = MomoConfig.from_app_config()
        except ConfigurationError as e:
            raise CommandError(str(e))

        service = CollectionService()

        self.stdout.write(self.style.SUCCESS('\n=== MTN MoMo Payment Test ===\n'))

        if options['check_balance']:
            self._show_balance(service, config)

        if options['status']:
            self._show_status(service, config, options['status'])
            return

        if not options['phone'] or not options['amount']:
            raise CommandError('--phone and --amount are required unless --status is given')

        external_id = options.get('reference') or f"TEST-{uuid.uuid4().hex[:8].upper()}"
        payment = {
            'amount': options['amount'],
            'currency': options['currency'],
            'externalId': external_id,
            'payer': {'partyIdType': 'MSISDN', 'partyId': options['phone']},
            'payerMessage': 'MoMo test payment',
            'payeeNote': external_id,
        }

        self.stdout.write('Requesting payment...')
        self.stdout.write(f"  Phone: {mask_party_id(options['phone'])}")
        self.stdout.write(f"  Amount: {format_currency(options['amount'], options['currency'])}")
        self.stdout.write(f'  External ID: {external_id}\n')

        result = service.request_to_pay(config, payment)
        if not result.ok:
            raise CommandError(f'Payment request failed: {self._describe(result.error)}')

        reference_id = result.value
        self.stdout.write(self.style.SUCCESS('\n✓ Payment requested successfully!'))
        self.stdout.write(f'  Reference ID: {reference_id}')
        self.stdout.write(self.style.WARNING(
            '\nNote: The payer must approve the request on their phone.'
        ))
        self.stdout.write(
            f'\nTo check status later, run:\n'
            f'  python manage.py momo_test_payment --status {reference_id}'
        )

    def _show_balance(self, service, config):
        self.stdout.write('Checking collection balance...')
        result = service.get_balance(config)
        if result.ok:
            balance = result.value if isinstance(result.value, dict) else {}
            self.stdout.write(self.style.SUCCESS(
                f"Account Balance: "
                f"{format_currency(balance.get('availableBalance', 0), balance.get('currency', ''))}\n"
            ))
        else:
            self.stdout.write(self.style.ERROR(
                f"Failed to check balance: {self._describe(result.error)}\n"
            ))

    def _show_status(self, service, config, reference_id):
        self.stdout.write(f'Checking status of {reference_id}...')
        result = service.get_transaction_status(config, reference_id)
        if not result.ok:
            raise CommandError(f'Status check failed: {self._describe(result.error)}')

        transaction = result.value
        if not isinstance(transaction, dict):
            self.stdout.write(f'  Response: {transaction}')
            return

        status = transaction.get('status', 'UNKNOWN')
        if status == TransactionStatus.SUCCESSFUL.value:
            style = self.style.SUCCESS
        elif status == TransactionStatus.FAILED.value:
            style = self.style.ERROR
        else:
            style = self.style.WARNING

        self.stdout.write(f'  Status: {style(status)}')
        if transaction.get('amount'):
            self.stdout.write(
                f"  Amount: {format_currency(transaction['amount'], transaction.get('currency', ''))}"
            )
        if transaction.get('reason'):
            self.stdout.write(f"  Reason: {transaction['reason']}")

    def _describe(self, error):
        if isinstance(error, ValidationError):
            return '; '.join(f'{e.field}: {e.message}' for e in error.errors)
        return f'[{error.code}] {error.message} {error.response_data or ""}'.strip()
