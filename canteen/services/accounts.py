"""
Credentials generation for worker accounts created by an administrator.
"""
import re
import secrets
import string
import unicodedata

from email_validator import EmailNotValidError, validate_email

from canteen.core.config import get_settings
from canteen.repositories.user import UserRepository

PASSWORD_ALPHABET = string.ascii_lowercase + string.digits

# Characters kept in a name part; dots separate parts
_NAME_PART_INVALID = re.compile(r"[^a-z0-9_-]+")

FALLBACK_LOCAL_PART = "worker"


def _email_part(name: str) -> str:
    """Lower-case ASCII form of a name, reduced to letters, digits, '-' and '_'."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return _NAME_PART_INVALID.sub("", ascii_name.lower())


def _local_part(first_name: str, last_name: str) -> str:
    parts = [part for part in (_email_part(first_name), _email_part(last_name)) if part]
    return ".".join(parts) or FALLBACK_LOCAL_PART


def _is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def generate_email(users: UserRepository, first_name: str, last_name: str) -> str:
    """
    Build a unique canteen email from a worker's name.

    The first worker named Jan Kowalski gets jan.kowalski@<domain>; later
    namesakes get the number of existing namesakes appended
    (jan.kowalski1@, jan.kowalski2@, ...). Characters that cannot appear in
    an address are dropped from the name.
    """
    domain = get_settings().EMAIL_DOMAIN
    local_part = _local_part(first_name, last_name)
    if not _is_valid_email(f"{local_part}@{domain}"):
        local_part = FALLBACK_LOCAL_PART
    suffix = users.count_by_name(first_name, last_name)

    while True:
        email = f"{local_part}{suffix or ''}@{domain}"
        if users.find_user_by_email(email) is None:
            return email
        suffix += 1


def generate_password(length: int | None = None) -> str:
    """Random lowercase alphanumeric password."""
    length = length or get_settings().GENERATED_PASSWORD_LENGTH
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
