import os
import time

from flask import current_app


ALLOWED_IMAGE_EXTENSIONS = {
    ".jpeg",
    ".jpg",
    ".png",
    ".gif",
}

ALLOWED_IMAGE_MIME_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
}

IMAGE_TYPE_ERROR = "Only image files are allowed!"


class MediaStorageError(Exception):
    pass


def _upload_folder() -> str:
    return current_app.config["UPLOAD_FOLDER"]


def _url_prefix() -> str:
    return current_app.config.get("UPLOAD_URL_PREFIX", "/uploads").rstrip("/")


def _extension_of(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def validate_image(file_storage):
    if file_storage is None or not getattr(file_storage, "filename", ""):
        raise ValueError("Image file is required")

    extension = _extension_of(file_storage.filename)
    mimetype = (getattr(file_storage, "mimetype", None) or "").lower()
    if extension not in ALLOWED_IMAGE_EXTENSIONS or mimetype not in ALLOWED_IMAGE_MIME_TYPES:
        raise ValueError(IMAGE_TYPE_ERROR)

    return extension


def generate_filename(extension: str, folder: str) -> str:
    stamp = str(int(time.time() * 1000))
    filename = f"{stamp}{extension}"
    suffix = 1
    while os.path.exists(os.path.join(folder, filename)):
        filename = f"{stamp}-{suffix}{extension}"
        suffix += 1
    return filename


def build_image_url(filename: str) -> str:
    return f"{_url_prefix()}/{filename}"


def filename_from_url(image_url):
    if not image_url:
        return None
    prefix = _url_prefix() + "/"
    if not image_url.startswith(prefix):
        return None

    filename = image_url[len(prefix):]
    # Only flat names inside the upload folder are ever generated.
    if not filename or filename != os.path.basename(filename) or filename in {".", ".."}:
        return None
    return filename


def save_image(file_storage) -> str:
    """Validate and store an uploaded image, returning its generated name."""
    extension = validate_image(file_storage)

    folder = _upload_folder()
    try:
        os.makedirs(folder, exist_ok=True)
        filename = generate_filename(extension, folder)
        try:
            file_storage.stream.seek(0)
        except Exception:
            pass
        file_storage.save(os.path.join(folder, filename))
    except OSError as e:
        current_app.logger.exception("Could not write uploaded image")
        raise MediaStorageError("Media storage is unavailable") from e

    current_app.logger.info("Stored image %s", filename)
    return filename


def delete_image(image_url) -> bool:
    """Remove the file behind ``image_url``. A missing file is not an error."""
    filename = filename_from_url(image_url)
    if filename is None:
        current_app.logger.warning("Refusing to delete image outside uploads: %r", image_url)
        return False

    path = os.path.join(_upload_folder(), filename)
    try:
        os.remove(path)
    except FileNotFoundError:
        current_app.logger.warning("Image %s was already absent", filename)
        return False

    current_app.logger.info("Removed image %s", filename)
    return True
