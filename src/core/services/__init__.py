"""Servicios del Core: clasificación, resolución de target y despacho."""
