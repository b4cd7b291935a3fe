"""Adaptadores de infraestructura: juju, fzf, subprocess y shell."""
