"""
Management command to archive a ledger as a journey.

Closes an owner's current ledger from the command line, the same way the
archive endpoint does.

Usage:
    python manage.py archive_journey --owner <user-id> --name "Trip"
    python manage.py archive_journey --owner <user-id> --name "Trip" --dry-run
"""

from django.core.management.base import BaseCommand, CommandError

from apps.ledger.services import current_ledger
from apps.settlements.services import archive_journey
from apps.journeys.exceptions import InvalidJourneyNameError
from apps.journeys.services import archive_current_ledger


class Command(BaseCommand):
    help = 'Archive the current expenses of a ledger as a journey'

    def add_arguments(self, parser):
        parser.add_argument('--owner', required=True, help='Ledger owner id')
        parser.add_argument('--name', required=True, help='Journey name')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show the settlement without archiving anything',
        )

    def handle(self, *args, **options):
        owner = options['owner']
        name = options['name']

        if options['dry_run']:
            persons, records = current_ledger(owner=owner)
            try:
                plan = archive_journey(name, persons, records)
            except ValueError as e:
                raise CommandError(str(e))

            journey = plan.journey
            self.stdout.write(
                f"\nJourney '{journey.name}': {journey.expense_count} expense(s), "
                f"{journey.people_count} people, total {journey.total_amount}\n"
            )
            for tx in journey.settlements:
                self.stdout.write(f'  - {tx.from_person} pays {tx.to_person} {tx.amount}')
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        try:
            journey = archive_current_ledger(owner=owner, name=name)
        except InvalidJourneyNameError as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(
                f"Archived journey '{journey.name}' with {journey.expense_count} expense(s) "
                f"and {len(journey.settlements)} payment(s)."
            )
        )
