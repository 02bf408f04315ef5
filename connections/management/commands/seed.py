"""Management command to seed the database with sample learners, friendships and requests."""

from random import choice, randint, sample, shuffle

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import transaction

from connections.models import FriendRequest, Friendship, User
from connections.models.friend_request import pair_key_for
from connections.services.accounts import random_avatar

LANGUAGES = [
    "English", "Spanish", "French", "German", "Italian", "Portuguese",
    "Japanese", "Mandarin", "Korean", "Russian", "Turkish", "Arabic",
]
LOCATIONS = [
    "Istanbul, Turkey", "Madrid, Spain", "Tokyo, Japan", "Moscow, Russia",
    "Rome, Italy", "Lisbon, Portugal", "Berlin, Germany", "Seoul, South Korea",
]


class Command(BaseCommand):
    """Management command to seed the database with sample learners."""
    USER_COUNT = 50
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample learners, friendships and friend requests'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--friends", type=int, default=3, help="Friendships created per user.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.generate_users(options["users"])
        self.seed_friendships(per_user=options["friends"])
        self.seed_pending_requests()
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def generate_users(self, total):
        """Create random onboarded learners until ``total`` users exist."""
        created = 0
        while User.objects.count() < total:
            self.generate_user()
            created += 1
        self.stdout.write(f"Users created: {created}")

    def generate_user(self):
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        native, *learning = sample(LANGUAGES, randint(2, 3))
        return User.objects.create_user(
            username=f"{first_name}.{last_name}.{self.faker.unique.random_int(1, 99999)}".lower(),
            email=self.faker.unique.email(),
            password=self.DEFAULT_PASSWORD,
            full_name=f"{first_name} {last_name}",
            bio=self.faker.sentence(nb_words=10),
            profile_pic=random_avatar(),
            native_language=native,
            learning_languages=learning,
            location=choice(LOCATIONS),
            is_onboarded=True,
        )

    def seed_friendships(self, *, per_user: int = 3) -> None:
        """Link each user to a few random others."""
        ids = list(User.objects.values_list("id", flat=True))
        if len(ids) < 2:
            return

        k = max(0, min(per_user, len(ids) - 1))
        pairs: set[tuple[int, int]] = set()
        for user_id in ids:
            for other in sample([x for x in ids if x != user_id], k):
                pairs.add((min(user_id, other), max(user_id, other)))

        rows = [Friendship(user_low_id=low, user_high_id=high) for low, high in pairs]
        accepted = [
            FriendRequest(sender_id=low, recipient_id=high, status=FriendRequest.STATUS_ACCEPTED, pair_key=pair_key_for(low, high))
            for low, high in pairs
        ]
        with transaction.atomic():
            Friendship.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
            FriendRequest.objects.bulk_create(accepted, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"Friendships attempted: {len(rows)}")

    def seed_pending_requests(self) -> None:
        """Send a pending request from each user to someone they have no history with."""
        ids = list(User.objects.values_list("id", flat=True))
        taken = set(FriendRequest.objects.values_list("pair_key", flat=True))
        rows = []
        for sender_id in ids:
            candidates = [x for x in ids if x != sender_id]
            shuffle(candidates)
            for recipient_id in candidates[:5]:
                key = pair_key_for(sender_id, recipient_id)
                if key in taken:
                    continue
                taken.add(key)
                rows.append(FriendRequest(sender_id=sender_id, recipient_id=recipient_id, pair_key=key))
                break
        FriendRequest.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"Pending requests created: {len(rows)}")
