"""Core de lsr: dominio, servicios y configuración."""
