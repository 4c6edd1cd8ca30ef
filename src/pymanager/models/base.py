"""
Utilidades comunes para los modelos Pydantic.
"""

import time


def current_timestamp() -> int:
    """Segundos desde epoch (UTC) del reloj de pared."""
    return int(time.time())
