import tkinter as tk

from config.settings import FUENTE_MONO


class ReservaMonitor(tk.LabelFrame):
    """Panel izquierdo: mesas libres por hora."""

    def __init__(self, parent, main_controller):
        super().__init__(parent, text="Disponibilidad por hora", padx=10, pady=10)
        self.main_window = main_controller
        self._init_widgets()

    def _init_widgets(self):
        f_txt = tk.Frame(self); f_txt.pack(fill=tk.BOTH, expand=True)
        sb = tk.Scrollbar(f_txt); sb.pack(side=tk.RIGHT, fill=tk.Y)
        self.txt_disponibilidad = tk.Text(f_txt, font=FUENTE_MONO, state=tk.DISABLED, yscrollcommand=sb.set)
        self.txt_disponibilidad.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        sb.config(command=self.txt_disponibilidad.yview)

        tk.Button(self, text="🔄 Actualizar disponibilidad", bg="#eee", command=self.cargar_datos).pack(fill=tk.X, pady=5)

    def cargar_datos(self):
        fecha = self.main_window.form.fecha_seleccionada()
        texto = self.main_window.controller.texto_disponibilidad(fecha=fecha)
        self.txt_disponibilidad.config(state=tk.NORMAL)
        self.txt_disponibilidad.delete("1.0", tk.END)
        self.txt_disponibilidad.insert(tk.END, texto or "Sin horas reservables para esta fecha.\n")
        self.txt_disponibilidad.config(state=tk.DISABLED)
