from datetime import datetime

REPORT_TEMPLATE = """Voicely Translation Report
==========================

Source file: {source_file_name}
Created at: {created_at}

Original text
-------------
{original_text}

Translated text
---------------
{translated_text}
"""


def render_report(
    original_text: str,
    translated_text: str,
    source_file_name: str,
    created_at: datetime,
) -> str:
    """Fill the plain report template with the full texts."""
    return REPORT_TEMPLATE.format(
        source_file_name=source_file_name,
        created_at=created_at.isoformat(timespec="seconds"),
        original_text=original_text,
        translated_text=translated_text,
    )
