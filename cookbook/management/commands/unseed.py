from django.core.management.base import BaseCommand
from django.db import transaction

from cookbook.models import User


class Command(BaseCommand):
    """
    Remove seeded sample data.

    Deletes every non-staff user. Profiles, recipes (with ingredients and
    steps) and ratings go with them through cascading deletes.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_count, per_model = User.objects.filter(is_staff=False).delete()

        users = per_model.get(User._meta.label, 0)
        self.stdout.write(self.style.SUCCESS(f"Deleted {users} non-staff users ({deleted_count} rows in total)."))
