"""User interface package for MediaTimer"""

from .editor import ScheduleEditor, Screen, ErrorKind, ListSelection
from .keys import Key, KeyEvent, translate_key
from .text_input import TextInput

__all__ = [
    'ScheduleEditor', 'Screen', 'ErrorKind', 'ListSelection',
    'Key', 'KeyEvent', 'translate_key', 'TextInput',
]
