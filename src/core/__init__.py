"""Core del gateway: dominio, contratos y servicios (sin I/O de procesos)."""
