# src/wcag_auditor/checks/images.py
import re

from ..dom.core import element_snippet, get_attr
from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker

FILENAME_PATTERN = re.compile(
    r'^(IMG_|DSC_|DCIM_|Photo_|Screenshot_|image)?\w*\.(jpe?g|png|gif|tiff?|webp|bmp|svg)$',
    re.IGNORECASE
)


def is_filename(text: str) -> bool:
    """True when alt text is just an image file name (e.g. 'IMG_0042.JPG')."""
    return bool(FILENAME_PATTERN.match(text.strip()))


class AltTextRequirementChecker(BaseChecker):
    """WCAG 1.1.1 Non-text Content for <img> elements."""
    option_key = "check_images"
    criteria = ("1.1.1",)

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []

        for index, img in enumerate(doc.find_all("img")):
            snippet = element_snippet(img)
            alt = get_attr(img, "alt")
            is_decorative = get_attr(img, "role") == "presentation" or get_attr(img, "aria-hidden") == "true"

            # alt=None means the attribute is missing
            if alt is None:
                errors.append(self.error(
                    "1.1.1",
                    f"Image at index {index} is missing the alt attribute.",
                    'Add an alt attribute with descriptive text, or alt="" for decorative images.',
                    element=snippet,
                    image_index=index
                ))
                continue

            # alt="" is fine only when the image is marked decorative
            if alt == "":
                if not is_decorative:
                    warnings.append(self.warning(
                        "1.1.1",
                        f"Image at index {index} has empty alt text but is not marked as decorative.",
                        'Add descriptive alt text, or add role="presentation" if the image is decorative.',
                        element=snippet,
                        image_index=index
                    ))
                continue

            if is_filename(alt):
                errors.append(self.error(
                    "1.1.1",
                    f'Image alt text appears to be a filename: "{alt}".',
                    "Replace the filename with descriptive alt text that conveys the image content.",
                    element=snippet,
                    image_index=index
                ))

        return CheckResult(errors, warnings)
