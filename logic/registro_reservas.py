import logging
import threading

logger = logging.getLogger("reservas.registro")


def normalizar_hora(fecha_hora):
    """Lleva cualquier fecha/hora al inicio de su hora (18:45 -> 18:00)."""
    return fecha_hora.replace(minute=0, second=0, microsecond=0)


class RegistroReservas:
    """
    Registro en memoria de las reservas por hora.
    Cada hora guarda la lista de clientes en orden de llegada; las mesas
    no tienen identidad, solo se cuentan contra la capacidad total.
    """

    def __init__(self, capacidad, permitir_duplicados=True):
        if isinstance(capacidad, bool) or not isinstance(capacidad, int) or capacidad <= 0:
            raise ValueError(f"La capacidad debe ser un entero positivo: {capacidad!r}")
        self._capacidad = capacidad
        self._permitir_duplicados = permitir_duplicados
        self._reservas = {}
        self._lock = threading.Lock()

    @property
    def capacidad(self):
        return self._capacidad

    def _admite_reserva(self, nombre, clientes):
        # Política de duplicados: un mismo nombre puede ocupar varias mesas en la misma hora
        return self._permitir_duplicados or nombre not in clientes

    def reservar(self, nombre, fecha_hora):
        """Retorna True si quedó registrada, False si la hora está llena."""
        hora = normalizar_hora(fecha_hora)
        with self._lock:
            clientes = self._reservas.setdefault(hora, [])
            if len(clientes) >= self._capacidad or not self._admite_reserva(nombre, clientes):
                logger.debug("Reserva rechazada: %r a las %s (%d/%d)", nombre, hora, len(clientes), self._capacidad)
                return False
            clientes.append(nombre)
            logger.debug("Reserva registrada: %r a las %s (%d/%d)", nombre, hora, len(clientes), self._capacidad)
            return True

    def existe_reserva(self, nombre, fecha_hora):
        hora = normalizar_hora(fecha_hora)
        with self._lock:
            return nombre in self._reservas.get(hora, ())

    def cancelar(self, nombre, fecha_hora):
        """Quita solo la primera aparición del nombre en esa hora."""
        hora = normalizar_hora(fecha_hora)
        with self._lock:
            clientes = self._reservas.get(hora)
            if not clientes or nombre not in clientes:
                return False
            clientes.remove(nombre)
            logger.debug("Reserva cancelada: %r a las %s", nombre, hora)
            return True

    def ocupadas(self, fecha_hora):
        hora = normalizar_hora(fecha_hora)
        with self._lock:
            return len(self._reservas.get(hora, ()))

    def mesas_libres(self, fecha_hora):
        return self._capacidad - self.ocupadas(fecha_hora)

    def conteo_por_hora(self):
        """Copia de {hora: cantidad}, incluidas las horas que quedaron en cero."""
        with self._lock:
            return {hora: len(clientes) for hora, clientes in self._reservas.items()}
