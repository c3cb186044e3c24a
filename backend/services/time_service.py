"""
Servicio de hora local reutilizable
"""
from datetime import datetime
import pytz
from config.settings import LOCAL_TIMEZONE

LOCAL_TZ = pytz.timezone(LOCAL_TIMEZONE)

def get_local_now():
    """Obtener la hora actual en el timezone configurado"""
    return datetime.now(LOCAL_TZ)
