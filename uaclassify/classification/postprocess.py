"""Post-processing of raw category records.

The matcher returns whatever the winning rule captured. These functions
turn that raw output into the values callers see: canonical browser
names, a derived major version, and device defaults inferred from the
operating system.
"""

import re

from uaclassify.core.models import SENTINEL, CategoryRecord

# Raw browser tokens (lower-case) -> canonical browser name
BROWSER_ALIASES: dict[str, str] = {
    "webkit": "Safari",
    "khtml": "Konqueror",
    "gecko": "Firefox",
    "blink": "Chrome",
    "opr": "Opera",
    "samsungbrowser": "Samsung Browser",
    "crios": "Chrome",
    "crmo": "Chrome",
    "fxios": "Firefox",
    "edg": "Edge",
    "edga": "Edge",
    "edgios": "Edge",
    "msie": "IE",
    "trident": "IE",
    "baidubrowser": "Baidu",
    "bidubrowser": "Baidu",
    "baiduboxapp": "Baidu App",
    "metasr": "Sogou Explorer",
    "lbbrowser": "Liebao",
    "2345explorer": "2345 Explorer",
}

_NON_VERSION_CHARS = re.compile(r"[^\d.]")

ANDROID_OS_NAME = "Android"
GENERIC_VENDOR = "Generic"
DEFAULT_ANDROID_TYPE = "mobile"


def canonical_browser_name(name: str) -> str:
    """Map a raw browser token to its canonical name, if it has one."""
    return BROWSER_ALIASES.get(name.lower(), name)


def major_version(version: str) -> str:
    """Derive the major version from a full version string.

    Every character other than digits and dots is dropped and the first
    dot-separated segment is returned, e.g. "38.0.2125.102" -> "38". The
    result can be empty when the version starts with a dot.
    """
    if version == SENTINEL:
        return SENTINEL
    return _NON_VERSION_CHARS.sub("", version).split(".")[0]


def process_browser(record: CategoryRecord) -> CategoryRecord:
    """Canonicalize the browser name and fill in the major version."""
    name = record.get("name", SENTINEL)
    if name:
        record["name"] = canonical_browser_name(name)
    record["major"] = major_version(record.get("version", SENTINEL))
    return record


def process_os(record: CategoryRecord) -> CategoryRecord:
    version = record.get("version")
    record["version"] = SENTINEL if version is None else str(version)
    return record


def process_device(record: CategoryRecord, os_record: CategoryRecord) -> CategoryRecord:
    """Clean up a device record.

    Args:
        record: Raw device record from the matcher.
        os_record: Post-processed OS record for the same input.

    Returns:
        The same record, updated in place.
    """
    os_name = os_record.get("name") or SENTINEL
    if record.get("type") == SENTINEL and os_name.lower() == ANDROID_OS_NAME.lower():
        if record.get("vendor") == SENTINEL:
            record["vendor"] = GENERIC_VENDOR
        record["type"] = DEFAULT_ANDROID_TYPE

    # The SamsungBrowser product token is not a device model
    if record.get("vendor") == "Samsung" and record.get("model") == "Browser":
        record["model"] = GENERIC_VENDOR

    model = record.get("model")
    if model and ";" in model:
        record["model"] = model.split(";", 1)[0]

    return record
