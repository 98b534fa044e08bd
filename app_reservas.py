from config.logging_config import setup_logging
from config.settings import TOTAL_MESAS, PERMITIR_NOMBRE_DUPLICADO
from logic.registro_reservas import RegistroReservas


def main():
    logger = setup_logging()
    logger.info(f"Iniciando sistema de reservas ({TOTAL_MESAS} mesas)")
    # Import diferido: tkinter solo se carga al abrir la ventana
    from ui.main_window import MainWindow

    registro = RegistroReservas(TOTAL_MESAS, permitir_duplicados=PERMITIR_NOMBRE_DUPLICADO)
    MainWindow(registro).run()


# Ejecución
if __name__ == "__main__":
    main()
