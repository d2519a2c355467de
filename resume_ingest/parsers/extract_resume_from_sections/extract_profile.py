# resume_ingest/parsers/extract_resume_from_sections/extract_profile.py
from typing import Dict, List

from resume_ingest.parsers.extract_resume_from_sections.lib.common_features import (
    EMAIL_RE,
    LINKEDIN_RE,
    LOCATION_RES,
    find_phone_numbers,
    looks_like_name,
)


def match_name(candidates: List[str]) -> str:
    for line in candidates:
        if looks_like_name(line):
            return line
    return ""


def extract_contact_details(text: str) -> Dict[str, str]:
    """
    One sweep over the whole document, independent of sections: the first
    email, phone number and LinkedIn handle found anywhere.
    """
    email_match = EMAIL_RE.search(text)
    phone_match = next(find_phone_numbers(text), None)
    linkedin_match = LINKEDIN_RE.search(text)
    return {
        "email": email_match.group(0) if email_match else "",
        "phone": phone_match.group(0) if phone_match else "",
        "linkedin": linkedin_match.group(0) if linkedin_match else "",
    }


def extract_location(profile_lines: List[str]) -> str:
    # Tried pattern by pattern so "City, ST" beats the looser "City, Country".
    candidates = [line for line in profile_lines if "@" not in line]
    for pattern in LOCATION_RES:
        for line in candidates:
            match = pattern.search(line)
            if match:
                return match.group(1)
    return ""
