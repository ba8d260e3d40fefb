"""Command implementations for mediadiff."""

from .display import cmd_display
from .delete import cmd_delete
from .importer import cmd_import_known
from .options import cmd_set_option

__all__ = ['cmd_display', 'cmd_delete', 'cmd_import_known', 'cmd_set_option']
