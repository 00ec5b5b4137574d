# Text helpers for names, message bodies and timestamps

from datetime import datetime, timezone


def clean_name(value, max_length):
    # Trim and cut a user or room name; empty string when nothing is left
    if value is None:
        return ''
    return str(value).strip()[:max_length].rstrip()


def clip_text(value, max_length):
    # Normalize message text: strip outer whitespace, keep inner line breaks
    if value is None:
        return ''
    text = str(value).replace('\x00', '')
    lines = text.strip().split('\n')
    return '\n'.join(line.rstrip() for line in lines)[:max_length]


def utc_now():
    return datetime.now(timezone.utc)


def iso_timestamp(moment):
    # 2024-05-01T12:00:00.000Z
    if moment is None:
        return None
    return moment.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.') + f'{moment.microsecond // 1000:03d}Z'
