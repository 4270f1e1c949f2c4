# activities/management/commands/show_activities.py
"""
Management command printing the activity board.

This command fetches the catalog from the activities API once and
prints it with the same filter, search and sort controls as the
web board. It can be executed using::

    python manage.py show_activities --category Sports --sort schedule
"""

from django.core.management.base import BaseCommand, CommandError

from activities.gateways import get_activity_gateway
from activities.loader import LOAD_FAILED_TEXT, load_catalog
from activities.models import BoardState
from activities.pipeline import SORT_BY_NAME, SORT_BY_SCHEDULE, FilterCriteria
from activities.rendering import NO_PARTICIPANTS_TEXT, render_board


class Command(BaseCommand):
    """
    Django management command printing the board.

    Attributes
    ----------
    help : str
        Short description displayed in ``python manage.py help``.
    """

    help = "Fetch the activities and print them with optional filters."

    def add_arguments(self, parser):
        parser.add_argument("--category", default="", help="Only show this category.")
        parser.add_argument("--search", default="", help="Case-insensitive text search.")
        parser.add_argument(
            "--sort",
            default="",
            choices=["", SORT_BY_NAME, SORT_BY_SCHEDULE],
            help="Sort by name or schedule; server order by default.",
        )

    def handle(self, *args, **options):
        """
        Execute the command.

        Parameters
        ----------
        *args : list
            Additional positional arguments.
        **options : dict
            Command options from the CLI.

        Raises
        ------
        CommandError
            If the catalog cannot be loaded.
        """
        state = BoardState()
        if not load_catalog(state, get_activity_gateway()):
            raise CommandError(LOAD_FAILED_TEXT)

        criteria = FilterCriteria(
            category=options["category"],
            search=options["search"],
            sort=options["sort"],
        )
        view = render_board(state, criteria)

        self.stdout.write(
            f"Categories: {', '.join(state.categories) if state.categories else '-'}"
        )
        if not view.cards:
            self.stdout.write("No matching activities.")
            return

        for card in view.cards:
            self.stdout.write("")
            self.stdout.write(self.style.MIGRATE_HEADING(card.name))
            self.stdout.write(f"  {card.description}")
            self.stdout.write(f"  Schedule: {card.schedule}")
            spots = f"  Availability: {card.spots_left} spots left"
            self.stdout.write(self.style.WARNING(spots) if card.spots_left <= 0 else spots)
            if card.has_participants:
                self.stdout.write("  Participants:")
                for row in card.participants:
                    self.stdout.write(f"    - {row.email}")
            else:
                self.stdout.write(f"  {NO_PARTICIPANTS_TEXT}")
