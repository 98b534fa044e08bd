import tkinter as tk
import logging

from ui.reserva_form import ReservaForm
from ui.reserva_monitor import ReservaMonitor
from logic.reserva_controller import ReservaController
from config.settings import TITULO_VENTANA, GEOMETRIA_VENTANA

logger = logging.getLogger("reservas.ui")

class MainWindow:
    def __init__(self, registro):
        self.root = tk.Tk()
        self.root.title(TITULO_VENTANA)
        self.root.geometry(GEOMETRIA_VENTANA)
        self.controller = ReservaController(registro)
        # El monitor lee la fecha del formulario: crear el formulario primero
        self.form = ReservaForm(self.root, self)
        self.form.pack(side=tk.RIGHT, fill=tk.Y)
        self.monitor = ReservaMonitor(self.root, self)
        self.monitor.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.monitor.cargar_datos()

    def run(self):
        logger.info("Ventana principal abierta")
        self.root.mainloop()
