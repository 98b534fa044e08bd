import tkinter as tk
from tkinter import ttk, messagebox
from datetime import date
from tkcalendar import DateEntry

from config.settings import COLOR_BOTON, COLOR_PANEL
from logic.reserva_controller import ReservaInvalidaError

class ReservaForm(tk.Frame):
    def __init__(self, parent, main_controller):
        super().__init__(parent, width=340, bg=COLOR_PANEL, padx=10, pady=10)
        self.pack_propagate(False)
        self.main_window = main_controller
        self.horas_actuales = [] # Horas mostradas en el combo, mismo orden
        self._init_widgets()
        self.cargar_horas()

    def _init_widgets(self):
        tk.Label(self, text="CONTROL DE RESERVAS", font=("Arial", 14, "bold"), bg=COLOR_PANEL).pack(pady=5)

        tk.Label(self, text="Cliente:", bg=COLOR_PANEL, anchor="w").pack(fill=tk.X)
        self.entry_nombre = tk.Entry(self, font=("Arial", 11))
        self.entry_nombre.pack(fill=tk.X, pady=2)

        tk.Label(self, text="Fecha y Hora:", bg=COLOR_PANEL, anchor="w").pack(fill=tk.X)
        f_hora = tk.Frame(self, bg=COLOR_PANEL); f_hora.pack(fill=tk.X)
        self.entry_fecha = DateEntry(f_hora, width=12, date_pattern='yyyy-mm-dd', mindate=date.today(), state="readonly")
        self.entry_fecha.pack(side=tk.LEFT)
        self.entry_fecha.bind("<<DateEntrySelected>>", self.on_fecha)
        self.combo_hora = ttk.Combobox(f_hora, state="readonly", width=18)
        self.combo_hora.pack(side=tk.LEFT, padx=5)

        self.btn_reservar = tk.Button(self, text="Reservar", bg=COLOR_BOTON, fg="white", font=("Arial", 11, "bold"), height=2, command=self.reservar)
        self.btn_reservar.pack(fill=tk.X, pady=(15, 5))
        tk.Button(self, text="Verificar reserva", command=self.verificar).pack(fill=tk.X, pady=2)
        tk.Button(self, text="Cancelar reserva", command=self.cancelar).pack(fill=tk.X, pady=2)
        tk.Button(self, text="Ver resumen", command=self.ver_resumen).pack(fill=tk.X, pady=2)

        tk.Label(self, text="Registro:", bg=COLOR_PANEL, anchor="w").pack(fill=tk.X, pady=(10, 0))
        self.txt_log = tk.Text(self, height=10, wrap=tk.WORD, state=tk.DISABLED)
        self.txt_log.pack(fill=tk.BOTH, expand=True)

    def fecha_seleccionada(self):
        return self.entry_fecha.get_date()

    def cargar_horas(self):
        self.horas_actuales = self.main_window.controller.horas_reservables(fecha=self.fecha_seleccionada())
        self.combo_hora['values'] = [self.main_window.controller.formatear_hora(h) for h in self.horas_actuales]
        if self.horas_actuales:
            self.combo_hora.current(0)
        else:
            self.combo_hora.set('')

    def on_fecha(self, event):
        self.cargar_horas()
        self.main_window.monitor.cargar_datos()

    def hora_seleccionada(self):
        idx = self.combo_hora.current()
        if idx < 0: return None
        return self.horas_actuales[idx]

    def escribir(self, mensaje):
        self.txt_log.config(state=tk.NORMAL)
        self.txt_log.insert(tk.END, mensaje + "\n")
        self.txt_log.see(tk.END)
        self.txt_log.config(state=tk.DISABLED)

    def _datos(self):
        hora = self.hora_seleccionada()
        if hora is None:
            messagebox.showerror("Error", "Seleccione una hora")
            return None, None
        return self.entry_nombre.get(), hora

    def reservar(self):
        nombre, hora = self._datos()
        if hora is None: return
        try:
            _, mensaje = self.main_window.controller.reservar(nombre, hora)
        except ReservaInvalidaError as e:
            self.escribir(str(e))
            return messagebox.showerror("Error", str(e))
        self.escribir(mensaje)
        self.main_window.monitor.cargar_datos()

    def verificar(self):
        nombre, hora = self._datos()
        if hora is None: return
        _, mensaje = self.main_window.controller.verificar(nombre, hora)
        self.escribir(mensaje)

    def cancelar(self):
        nombre, hora = self._datos()
        if hora is None: return
        cancelada, mensaje = self.main_window.controller.cancelar(nombre, hora)
        self.escribir(mensaje)
        if cancelada:
            self.main_window.monitor.cargar_datos()

    def ver_resumen(self):
        self.escribir(self.main_window.controller.texto_resumen().rstrip("\n"))
