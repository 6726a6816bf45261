import re
from dataclasses import dataclass

from storefront_api.core.application.exceptions import UploadError
from storefront_api.core.domain.media import ImageUpload

ALLOWED_MIME_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp")
ALLOWED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")
MAX_FILENAME_LENGTH = 255

DANGEROUS_FILENAME_PATTERNS = (
    re.compile(r"\.\."),
    re.compile(r'[<>:"|?*]'),
    re.compile(r"^(con|prn|aux|nul|com[1-9]|lpt[1-9])$", re.IGNORECASE),
)


def filename_problem(filename: str) -> str | None:
    extension = re.search(r"\.[^.]+$", filename.lower())
    if not extension or extension.group(0) not in ALLOWED_EXTENSIONS:
        return f"Invalid file extension. Allowed extensions: {', '.join(ALLOWED_EXTENSIONS)}"
    if len(filename) > MAX_FILENAME_LENGTH:
        return f"Filename too long. Maximum {MAX_FILENAME_LENGTH} characters allowed"
    if any(pattern.search(filename) for pattern in DANGEROUS_FILENAME_PATTERNS):
        return "Invalid filename. Contains dangerous characters or patterns"
    return None


@dataclass(frozen=True)
class UploadPolicy:
    """Limits applied to a multipart request before any image is decoded."""

    max_file_size: int
    max_files: int

    @property
    def max_file_size_mb(self) -> float:
        mb = self.max_file_size / (1024 * 1024)
        return int(mb) if mb.is_integer() else round(mb, 2)

    def check(self, uploads: list[ImageUpload]) -> None:
        if len(uploads) > self.max_files:
            raise UploadError(
                "Too many files", [f"Maximum {self.max_files} files allowed per request"]
            )
        for upload in uploads:
            if upload.size > self.max_file_size:
                raise UploadError(
                    "File too large",
                    [f"File size exceeds the maximum limit of {self.max_file_size_mb}MB"],
                )
            if upload.content_type not in ALLOWED_MIME_TYPES:
                raise UploadError(
                    "Invalid file",
                    [f"Invalid file type. Allowed types: {', '.join(ALLOWED_MIME_TYPES)}"],
                )
            problem = filename_problem(upload.filename)
            if problem:
                raise UploadError("Invalid file", [problem])
