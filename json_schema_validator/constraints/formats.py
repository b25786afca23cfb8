"""
Format checking for the ``format`` keyword.

Each recognised format combines a syntactic pattern with semantic checks
(calendar dates, clock ranges, IPv4 octets). Unknown format names are
always valid, since JSON Schema treats ``format`` as advisory unless the
implementation knows the format.
"""

import ipaddress
import re
from datetime import date
from typing import Callable, Dict
from urllib.parse import urlsplit

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
_TIME_RE = re.compile(r"^(\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})?$", re.ASCII)
_DATE_TIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2}(?:\.\d+)?)([Zz]|[+-]\d{2}:\d{2})$",
    re.ASCII
)
_DURATION_RE = re.compile(
    r"^P(?!$)(\d+Y)?(\d+M)?(\d+W)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?$",
    re.ASCII
)
_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
_HOSTNAME_LABEL_RE = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?$")
_UUID_RE = re.compile(r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}$")
_JSON_POINTER_RE = re.compile(r"^(/([^~/]|~[01])*)*$")
_RELATIVE_JSON_POINTER_RE = re.compile(r"^(0|[1-9][0-9]*)(#|(/([^~/]|~[01])*)*)$")
_URI_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
_URI_TEMPLATE_EXPR_RE = re.compile(r"^[+#./;?&=,!@|]?[A-Za-z0-9_%.]+(:[1-9][0-9]{0,3}|\*)?"
                                   r"(,[A-Za-z0-9_%.]+(:[1-9][0-9]{0,3}|\*)?)*$")


class FormatChecker:
    """
    Validates strings against named formats.

    The checker is stateless; ``FormatChecker.check`` can be called directly
    or through an instance.
    """

    @staticmethod
    def check(value: str, format_name: str) -> bool:
        """
        Check a string against a format.

        Args:
            value: String to check
            format_name: Format name from the schema

        Returns:
            True if the string conforms, or if the format is unknown
        """
        checker = _CHECKERS.get(format_name)
        if checker is None:
            return True
        return checker(value)

    @staticmethod
    def is_known(format_name: str) -> bool:
        """Check whether a format name is recognised."""
        return format_name in _CHECKERS

    # Date and time formats

    @staticmethod
    def is_date(value: str) -> bool:
        match = _DATE_RE.fullmatch(value)
        if not match:
            return False
        year, month, day = (int(part) for part in match.groups())
        try:
            date(year, month, day)
        except ValueError:
            return False
        return True

    @staticmethod
    def is_time(value: str) -> bool:
        match = _TIME_RE.fullmatch(value)
        if not match:
            return False
        hour, minute, second = int(match.group(1)), int(match.group(2)), int(match.group(3))
        if hour > 23 or minute > 59 or second > 59:
            return False
        return FormatChecker._is_offset(match.group(5))

    @staticmethod
    def is_date_time(value: str) -> bool:
        match = _DATE_TIME_RE.fullmatch(value)
        if not match:
            return False
        return FormatChecker.is_date(match.group(1)) and FormatChecker.is_time(match.group(2) + match.group(3))

    @staticmethod
    def is_duration(value: str) -> bool:
        return _DURATION_RE.fullmatch(value) is not None

    @staticmethod
    def _is_offset(offset) -> bool:
        if not offset or offset in ("Z", "z"):
            return True
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        return hours <= 23 and minutes <= 59

    # Network identities

    @staticmethod
    def is_email(value: str) -> bool:
        if _EMAIL_RE.fullmatch(value) is None:
            return False
        domain = value.rsplit("@", 1)[1]
        return ".." not in domain and not domain.startswith(".")

    @staticmethod
    def is_hostname(value: str) -> bool:
        if not value or len(value) > 253:
            return False
        labels = value[:-1].split(".") if value.endswith(".") else value.split(".")
        for label in labels:
            if not 1 <= len(label) <= 63:
                return False
            if _HOSTNAME_LABEL_RE.fullmatch(label) is None:
                return False
        return True

    @staticmethod
    def is_ipv4(value: str) -> bool:
        parts = value.split(".")
        if len(parts) != 4:
            return False
        for part in parts:
            if not part.isascii() or not part.isdigit():
                return False
            # Leading zeros are ambiguous (octal in some parsers)
            if len(part) > 1 and part.startswith("0"):
                return False
            if int(part) > 255:
                return False
        return True

    @staticmethod
    def is_ipv6(value: str) -> bool:
        if "%" in value:
            return False
        try:
            ipaddress.IPv6Address(value)
        except ValueError:
            return False
        return True

    # Resource identifiers

    @staticmethod
    def is_uri(value: str) -> bool:
        if not value or any(ch.isspace() for ch in value):
            return False
        try:
            parts = urlsplit(value)
        except ValueError:
            return False
        return bool(parts.scheme) and _URI_SCHEME_RE.fullmatch(parts.scheme) is not None

    @staticmethod
    def is_uri_reference(value: str) -> bool:
        if any(ch.isspace() for ch in value):
            return False
        try:
            urlsplit(value)
        except ValueError:
            return False
        return True

    @staticmethod
    def is_uri_template(value: str) -> bool:
        depth = 0
        expression = []
        for ch in value:
            if ch == "{":
                if depth:
                    return False
                depth += 1
                expression = []
            elif ch == "}":
                if not depth:
                    return False
                depth -= 1
                if _URI_TEMPLATE_EXPR_RE.fullmatch("".join(expression)) is None:
                    return False
            elif depth:
                expression.append(ch)
        return depth == 0

    @staticmethod
    def is_uuid(value: str) -> bool:
        return _UUID_RE.fullmatch(value) is not None

    @staticmethod
    def is_json_pointer(value: str) -> bool:
        return _JSON_POINTER_RE.fullmatch(value) is not None

    @staticmethod
    def is_relative_json_pointer(value: str) -> bool:
        return _RELATIVE_JSON_POINTER_RE.fullmatch(value) is not None

    @staticmethod
    def is_regex(value: str) -> bool:
        try:
            re.compile(value)
        except re.error:
            return False
        return True


# Internationalised variants share the ASCII checks
_CHECKERS: Dict[str, Callable[[str], bool]] = {
    "date": FormatChecker.is_date,
    "time": FormatChecker.is_time,
    "date-time": FormatChecker.is_date_time,
    "duration": FormatChecker.is_duration,
    "email": FormatChecker.is_email,
    "idn-email": FormatChecker.is_email,
    "hostname": FormatChecker.is_hostname,
    "idn-hostname": FormatChecker.is_hostname,
    "ipv4": FormatChecker.is_ipv4,
    "ipv6": FormatChecker.is_ipv6,
    "uri": FormatChecker.is_uri,
    "uri-reference": FormatChecker.is_uri_reference,
    "uri-template": FormatChecker.is_uri_template,
    "iri": FormatChecker.is_uri,
    "iri-reference": FormatChecker.is_uri_reference,
    "uuid": FormatChecker.is_uuid,
    "json-pointer": FormatChecker.is_json_pointer,
    "relative-json-pointer": FormatChecker.is_relative_json_pointer,
    "regex": FormatChecker.is_regex,
}
