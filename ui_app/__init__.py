"""Tkinter shell for the Fortune Teller."""
