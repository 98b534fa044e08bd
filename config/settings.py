import os

# Configuración del Negocio
TOTAL_MESAS = 10
HORA_APERTURA = 9
HORA_CIERRE = 22   # Última hora reservable
PERMITIR_NOMBRE_DUPLICADO = True

# Formato de las horas en pantalla
FORMATO_HORA = "%Y-%m-%d %H:%M"

# Ventana
TITULO_VENTANA = "Sistema de Reservas del Restaurante"
GEOMETRIA_VENTANA = "950x600"

# Constantes de Diseño (Colores)
COLOR_PANEL = "#f4f4f4"
COLOR_BOTON = "#007bff"
FUENTE_MONO = ("Courier", 11)

# Logging
LOG_DIR = "logs"
LOG_FILE = "reservas.log"
DEBUG = os.environ.get("RESERVAS_DEBUG", "0") == "1"
