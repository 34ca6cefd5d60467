"""Readers for Project Zomboid map, tile definition and texture pack files, with a rectangle packer."""

__version__ = "0.1.0"