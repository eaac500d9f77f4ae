"""Pirate strings, mostly useful for spotting untranslated output."""

from .strings import StringTable

_CRY = "AAAARG!!! - "

STRINGS = StringTable(
    default_name=_CRY + "CLI",
    default_banner=_CRY + "Welcome to the CLI",
    text_choice_not_char=_CRY + "Text choices must be a single character.",
    text_choice_not_lower=_CRY + "Text choices must be lowercase.",
    no_help=_CRY + "No help text available.",
    invalid_response=_CRY + "A valid response is required.",
    bad_format=_CRY + "Response does not match the format:",
    not_an_integer=_CRY + "Response must be an integer.",
    range_error=_CRY + "Response must be between the following, inclusively:",
    true_string=_CRY + "True, yes, on",
    false_string=_CRY + "False, no, off",
    acknowledge=_CRY + "Acknowledge message?",
)
