import logging

from connections.exceptions import MissingFields

logger = logging.getLogger(__name__)

# (model attribute, name reported to the client)
PROFILE_FIELDS = [
    ("full_name", "fullName"),
    ("bio", "bio"),
    ("native_language", "nativeLanguage"),
    ("learning_languages", "learningLanguages"),
    ("location", "location"),
    ("profile_pic", "profilePic"),
]
REQUIRED_FIELDS = ("full_name", "native_language", "learning_languages")
# listed in missingFields; only REQUIRED_FIELDS block onboarding
REPORTED_FIELDS = ("full_name", "bio", "native_language", "learning_languages", "location")


class OnboardingService:
    """Complete a user's learner profile so they can be recommended."""

    def __init__(self, user):
        self.user = user

    @staticmethod
    def _clean(data):
        cleaned = {}
        for attr, _ in PROFILE_FIELDS:
            if attr not in data:
                continue
            value = data[attr]
            if attr == "learning_languages":
                if isinstance(value, str):
                    value = [value]
                value = [str(v).strip() for v in (value or []) if str(v).strip()]
            else:
                value = (value or "").strip()
                if attr == "profile_pic" and not value:
                    continue
            cleaned[attr] = value
        return cleaned

    def onboard(self, data):
        """Validate and apply ``data`` (keyed by model attribute); marks the user onboarded."""
        cleaned = self._clean(data)
        if any(not cleaned.get(attr) for attr in REQUIRED_FIELDS):
            labels = dict(PROFILE_FIELDS)
            missing = [labels[attr] for attr in REPORTED_FIELDS if not cleaned.get(attr)]
            raise MissingFields(missing)

        for attr, value in cleaned.items():
            setattr(self.user, attr, value)
        self.user.is_onboarded = True
        self.user.save()
        logger.info("User %s completed onboarding", self.user.pk)
        return self.user
