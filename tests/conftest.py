"""
Pytest Fixtures para el sistema de reservas.

Cada test recibe un registro nuevo, así ningún test ve las reservas de otro.
"""
from datetime import datetime

import pytest

from logic.registro_reservas import RegistroReservas
from logic.reserva_controller import ReservaController


# ============ HORAS DE REFERENCIA ============

@pytest.fixture
def ahora():
    """Reloj fijo: 1 de enero de 2024, 15:20"""
    return datetime(2024, 1, 1, 15, 20)


@pytest.fixture
def hora_cena():
    return datetime(2024, 1, 1, 18, 0)


# ============ REGISTRO Y CONTROLADOR ============

@pytest.fixture
def registro():
    """Registro chico (2 mesas) para llenar rápido una hora"""
    return RegistroReservas(2)


@pytest.fixture
def registro_restaurante():
    """Registro con la capacidad del restaurante (10 mesas)"""
    return RegistroReservas(10)


@pytest.fixture
def controller(registro_restaurante):
    return ReservaController(registro_restaurante)
