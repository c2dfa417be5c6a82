"""Property upload form: auth guard, validation, image upload and insert."""

from __future__ import annotations

import logging
import re
import time

from src.config import settings
from src.controllers.base import FormError
from src.db import Backend, BackendError, insert_property
from src.models import ImageFile, Property, UploadForm, User

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
PREVIEW_ID = "preview"

_NUMBER_FIELDS = ("price", "beds", "baths", "kitchens", "sqft")
_COUNT_FIELDS = ("beds", "baths", "kitchens")
_OPTIONAL_TEXT = ("subtitle", "name", "finance_type", "agent_name", "agent_phone", "youtube_video_url")
_WHITESPACE = re.compile(r"\s+")


def storage_name(filename: str, now: float | None = None) -> str:
    """Object name for an uploaded image: ``<epoch ms>-<name, whitespace as dashes>``."""
    millis = int((time.time() if now is None else now) * 1000)
    return f"{millis}-{_WHITESPACE.sub('-', filename)}"


def _number(raw: str) -> float | int | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise FormError(f"Not a number: {raw}") from None
    return int(value) if value.is_integer() else value


class UploadController:
    def __init__(self, backend: Backend) -> None:
        self.backend = backend
        self.user: User | None = None
        self.redirect_to: str | None = None
        self.form = UploadForm()
        self.image: ImageFile | None = None
        self.uploading = False
        self.error: str | None = None
        self.success = False

    # ── auth ────────────────────────────────────────────────────────────

    def require_user(self) -> bool:
        """Load the signed-in user, or point the page at the login screen."""
        self.user = self.backend.get_current_user()
        if self.user is None:
            self.redirect_to = LOGIN_PATH
            return False
        return True

    def sign_out(self) -> bool:
        self.error = None
        try:
            self.backend.sign_out()
        except BackendError as e:
            self.error = "Sign out failed: " + e.message
            return False
        self.user = None
        self.redirect_to = LOGIN_PATH
        return True

    # ── form ────────────────────────────────────────────────────────────

    def update(self, **fields) -> None:
        self.form = self.form.model_copy(update=fields)

    def pick_image(self, image: ImageFile) -> bool:
        if not image.content_type.startswith("image/"):
            self.error = "Only image files are allowed."
            return False
        self.image = image
        return True

    def remove_image(self) -> None:
        self.image = None

    def validate(self) -> None:
        form = self.form
        if not form.title.strip():
            raise FormError("Title is required.")
        if not form.location.strip():
            raise FormError("Location is required.")
        if not form.price.strip():
            raise FormError("Price is required.")
        if self.image is None and not form.youtube_video_url.strip():
            raise FormError("Upload at least an image or provide a YouTube URL.")

    def payload(self, image_url: str | None = None) -> dict:
        """Insert row: numeric inputs converted, blank optional inputs sent as null."""
        form = self.form
        row: dict = {"title": form.title, "location": form.location}
        for key in _OPTIONAL_TEXT:
            row[key] = (getattr(form, key) or "").strip() or None
        for key in _NUMBER_FIELDS:
            row[key] = _number(getattr(form, key))
        row.update(
            use_embed_player=form.use_embed_player,
            new_listing=form.new_listing,
            trending=form.trending,
            image_url=image_url,
        )
        return row

    def preview(self) -> Property:
        """Live card preview of the current inputs; unparseable numbers are left blank."""
        row = {"id": PREVIEW_ID}
        for key, value in self.form.model_dump().items():
            if key in _NUMBER_FIELDS:
                try:
                    value = _number(value)
                except FormError:
                    value = None
                if key in _COUNT_FIELDS and not isinstance(value, int):
                    value = None
            row[key] = value if value != "" else None
        return Property.model_validate(row)

    # ── submit ──────────────────────────────────────────────────────────

    def submit(self) -> bool:
        """Upload the image (if any) then insert one listing row."""
        if self.uploading:
            return False
        self.error = None
        try:
            self.validate()
            payload = self.payload()
        except FormError as e:
            self.error = e.message
            return False

        self.uploading = True
        try:
            if self.image is not None:
                try:
                    path = self.backend.upload_file(
                        settings.IMAGES_BUCKET,
                        storage_name(self.image.name),
                        self.image.content,
                        self.image.content_type,
                    )
                except BackendError as e:
                    self.error = "Image upload failed: " + e.message
                    return False
                payload["image_url"] = self.backend.public_url(settings.IMAGES_BUCKET, path)

            try:
                insert_property(self.backend, payload)
            except BackendError as e:
                # The uploaded image, if any, is left in storage
                self.error = "Failed to create property: " + e.message
                return False
        finally:
            self.uploading = False

        logger.info("Listed property %r", payload["title"])
        self.success = True
        return True

    def reset(self) -> None:
        self.form = UploadForm()
        self.image = None
        self.success = False
        self.error = None
