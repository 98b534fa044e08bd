import logging
from datetime import datetime, timedelta

from config.settings import FORMATO_HORA, HORA_APERTURA, HORA_CIERRE
from logic.registro_reservas import normalizar_hora

logger = logging.getLogger("reservas.controller")


class ReservaInvalidaError(ValueError):
    """Datos ingresados por el operador que no permiten reservar."""


class ReservaController:

    def __init__(self, registro):
        self.registro = registro

    @staticmethod
    def formatear_hora(hora):
        return hora.strftime(FORMATO_HORA)

    @staticmethod
    def horas_reservables(ahora=None, fecha=None):
        """
        Horas que se ofrecen en pantalla.
        Hoy: desde la hora actual hasta el cierre; si ya pasó el cierre, el día siguiente completo.
        Fecha futura: de apertura a cierre. Fecha pasada: ninguna.
        """
        ahora = normalizar_hora(ahora or datetime.now())
        if isinstance(fecha, datetime):
            fecha = fecha.date()

        if fecha is None or fecha == ahora.date():
            inicio = ahora
            fin = ahora.replace(hour=HORA_CIERRE)
            if ahora.hour > HORA_CIERRE:
                inicio = (ahora + timedelta(days=1)).replace(hour=HORA_APERTURA)
                fin = inicio.replace(hour=HORA_CIERRE)
        elif fecha > ahora.date():
            inicio = ahora.replace(year=fecha.year, month=fecha.month, day=fecha.day, hour=HORA_APERTURA)
            fin = inicio.replace(hour=HORA_CIERRE)
        else:
            return []

        horas = []
        while inicio <= fin:
            horas.append(inicio)
            inicio += timedelta(hours=1)
        return horas

    def reservar(self, nombre, hora, ahora=None):
        nombre = (nombre or "").strip()
        if not nombre:
            logger.warning("Reserva rechazada: nombre vacío")
            raise ReservaInvalidaError("Ingrese un nombre.")
        if normalizar_hora(hora) < normalizar_hora(ahora or datetime.now()):
            logger.warning(f"Reserva rechazada: {nombre} pidió una hora pasada ({self.formatear_hora(hora)})")
            raise ReservaInvalidaError("No se puede reservar en una hora pasada.")

        exito = self.registro.reservar(nombre, hora)
        hora_txt = self.formatear_hora(normalizar_hora(hora))
        if exito:
            logger.info(f"Reserva confirmada: {nombre} a las {hora_txt}")
            return True, f"[{nombre}] Reserva confirmada para {hora_txt}"
        logger.info(f"Sin mesas: {nombre} a las {hora_txt}")
        return False, f"[{nombre}] No hay mesas disponibles."

    def verificar(self, nombre, hora):
        nombre = (nombre or "").strip()
        existe = self.registro.existe_reserva(nombre, hora)
        hora_txt = self.formatear_hora(normalizar_hora(hora))
        logger.info(f"Verificación: {nombre} a las {hora_txt} -> {existe}")
        if existe:
            return True, f"[{nombre}] Tiene reserva a las {hora_txt}"
        return False, f"[{nombre}] No se encontró reserva."

    def cancelar(self, nombre, hora):
        nombre = (nombre or "").strip()
        cancelada = self.registro.cancelar(nombre, hora)
        hora_txt = self.formatear_hora(normalizar_hora(hora))
        logger.info(f"Cancelación: {nombre} a las {hora_txt} -> {cancelada}")
        if cancelada:
            return True, f"[{nombre}] Reserva cancelada a las {hora_txt}"
        return False, f"[{nombre}] No hay reserva para cancelar."

    def texto_disponibilidad(self, ahora=None, fecha=None):
        capacidad = self.registro.capacidad
        lineas = []
        for hora in self.horas_reservables(ahora, fecha):
            libres = self.registro.mesas_libres(hora)
            linea = f"{self.formatear_hora(hora)} - Mesas disponibles: {libres}"
            if libres == 0:
                linea += " ❌"
            elif libres < capacidad:
                linea += " ✅"
            lineas.append(linea + "\n")
        return "".join(lineas)

    def texto_resumen(self):
        conteo = self.registro.conteo_por_hora()
        lineas = ["Resumen de reservas:\n"]
        for hora in sorted(conteo):
            lineas.append(f"{self.formatear_hora(hora)} - Reservas: {conteo[hora]}\n")
        return "".join(lineas)
