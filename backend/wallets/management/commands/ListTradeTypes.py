import json

from django.core.management.base import BaseCommand, CommandError

from wallets.services.TradeTypeQueryService import TradeTypeQueryService


class Command(BaseCommand):
    help = 'List the distinct trade types of enabled wallet addresses'

    def add_arguments(self, parser):
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print the API response envelope instead of one trade type per line',
        )

    def handle(self, *args, **options):
        result = TradeTypeQueryService().getEnabledTradeTypes()

        if not result.success:
            raise CommandError(f'Failed to read trade types: {result.errorMessage}')

        if options['json']:
            self.stdout.write(json.dumps(result.toDict()))
            return

        if not result.tradeTypes:
            self.stdout.write(self.style.WARNING('No enabled trade types'))
            return

        for tradeType in result.tradeTypes:
            self.stdout.write(tradeType)
