"""Dwarf, elf, barbarian and goblin name generators and bcrypt password helpers."""

__version__ = "0.1.0"