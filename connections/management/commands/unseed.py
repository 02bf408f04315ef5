from django.core.management.base import BaseCommand
from django.db import transaction
from connections.models import User

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes all non-staff users; their friend requests and friendships go
    with them through the cascading foreign keys. Administrative accounts
    are preserved.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """Delete every non-staff user and report how many rows went."""
        with transaction.atomic():
            deleted_count, _ = User.objects.filter(is_staff=False).delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} rows for non-staff users and related data."))
