"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (juju, fzf, subprocess) o dobles de test.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
