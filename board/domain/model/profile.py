"""Profile entity.

A profile is a persona authored by a user. Only its owner may change it,
and only the owner sees which user it belongs to.
"""

import re
from datetime import datetime

from bson import ObjectId
from pydantic import BaseModel

from board.config import FieldRule, ProfileSettings
from board.domain.error import NotAuthorizedError, ValidationError
from board.domain.model.common import DomainModel
from board.domain.value import AuthToken, ProfileId, UserId
from board.util.markdown import render_markdown


class ProfileView(BaseModel):
    """Client-facing projection of a profile."""

    id: str
    user: str | None  # Only populated for the owner
    name: str
    text: str
    mdtext: str
    date: str
    update: str
    sn: str


def _check(rule: FieldRule, value: str) -> None:
    if not re.fullmatch(rule.regex, value):
        raise ValidationError(rule.message)


class Profile(DomainModel):
    """User-authored persona.

    ``md_text`` is the rendered form of ``text`` and is recomputed whenever
    the text changes.
    """

    id: ProfileId
    user_id: UserId
    name: str
    text: str
    md_text: str
    created_at: datetime
    updated_at: datetime
    sn: str

    @classmethod
    def create(
        cls,
        auth: AuthToken,
        name: str,
        text: str,
        sn: str,
        now: datetime,
        settings: ProfileSettings,
    ) -> "Profile":
        """Create a profile owned by the authenticated user.

        Raises:
            ValidationError: If name, text or sn violates its rule
        """
        _check(settings.name, name)
        _check(settings.text, text)
        _check(settings.sn, sn)

        return cls(
            id=ProfileId(ObjectId()),
            user_id=auth.user,
            name=name,
            text=text,
            md_text=render_markdown(text),
            created_at=now,
            updated_at=now,
            sn=sn,
        )

    def change_data(
        self,
        auth: AuthToken,
        name: str,
        text: str,
        sn: str,
        now: datetime,
        settings: ProfileSettings,
    ) -> "Profile":
        """Return a copy with new name, text and sn.

        Raises:
            NotAuthorizedError: If the caller does not own the profile
            ValidationError: If name, text or sn violates its rule
        """
        if auth.user != self.user_id:
            raise NotAuthorizedError("profile", str(self.id), str(auth.user))
        _check(settings.name, name)
        _check(settings.text, text)
        _check(settings.sn, sn)

        return self.model_copy(
            update={
                "name": name,
                "text": text,
                "md_text": render_markdown(text),
                "sn": sn,
                "updated_at": now,
            }
        )

    def to_api(self, auth: AuthToken | None) -> ProfileView:
        """Project for a client, hiding the owner from everyone else."""
        is_owner = auth is not None and auth.user == self.user_id
        return ProfileView(
            id=str(self.id),
            user=str(self.user_id) if is_owner else None,
            name=self.name,
            text=self.text,
            mdtext=self.md_text,
            date=self.created_at.isoformat(),
            update=self.updated_at.isoformat(),
            sn=self.sn,
        )
