import logging
import uuid

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.utils import timezone

from base import Constants
from base.models import GuestSessionModel

logger = logging.getLogger(__name__)


class GuestSessionService:
    """Tracks anonymous shoppers by the token stored in their cookie."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    @staticmethod
    def generate_token():
        return str(uuid.uuid4())

    def get_active(self, token):
        """
        Return the unexpired session for `token`, or None.
        """
        if not token:
            return None
        return (
            GuestSessionModel.objects.using(self.using)
            .filter(sessionToken=token, expiresAt__gt=timezone.now())
            .first()
        )

    def ensure(self, token):
        """
        Make sure a live session exists for `token`.

        Unknown tokens get a new session, expired ones are renewed. Either way
        the session lives for another GUEST_SESSION_LIFETIME from now.

        Returns:
            GuestSessionModel: The session for `token`.
        """
        now = timezone.now()
        expires_at = now + Constants.GUEST_SESSION_LIFETIME
        sessions = GuestSessionModel.objects.using(self.using)

        session = sessions.filter(sessionToken=token).first()
        if session is None:
            try:
                with transaction.atomic(using=self.using):
                    session = sessions.create(sessionToken=token, expiresAt=expires_at)
                logger.debug(f"Created guest session {session.id}")
                return session
            except IntegrityError:
                # Another request for the same token got there first
                session = sessions.get(sessionToken=token)

        if session.expiresAt <= now:
            session.expiresAt = expires_at
            session.save(using=self.using, update_fields=["expiresAt"])
            logger.debug(f"Renewed expired guest session {session.id}")

        return session
