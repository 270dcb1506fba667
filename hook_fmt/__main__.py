from .cli import script_entry_point


script_entry_point()
