"""Встроенные сообщения командной строки (package data)."""
