# Functions package

from roomchat.functions.text import clean_name, clip_text, utc_now, iso_timestamp

__all__ = ['clean_name', 'clip_text', 'utc_now', 'iso_timestamp']
