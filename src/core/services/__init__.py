"""Servicios del Core: orquestan el dominio sin tocar la consola."""
