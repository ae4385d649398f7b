#!/usr/bin/env python3
"""Simple Tkinter GUI for the x^y power calculator."""
import sys
import tkinter as tk
from tkinter import messagebox
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from powcalc.integration.calculator import calculate_display
from powcalc.integration.config import load_display_config
from powcalc.integration.inputs import FIELD_BASE, FIELD_EXPONENT, validate_fields

IDLE_TEXT = "Result: (Enter values and click Calculate)"
ERROR_COLOR = "#c62828"


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Power Calculator (x^y)")
        self.geometry("520x260")

        self.config_ = load_display_config()
        self.base_var = tk.StringVar(value="")
        self.exponent_var = tk.StringVar(value="")
        self.result_var = tk.StringVar(value=IDLE_TEXT)
        self.error_var = tk.StringVar(value="")

        self._build_ui()
        self.base_var.trace_add("write", lambda *_: self._update_validation())
        self.exponent_var.trace_add("write", lambda *_: self._update_validation())
        self._update_validation()

    def _build_ui(self):
        top = tk.Frame(self)
        top.pack(fill=tk.X, padx=10, pady=8)

        tk.Label(top, text="Base (x)", underline=6).grid(row=0, column=0, sticky="w")
        self.base_entry = tk.Entry(top, textvariable=self.base_var, width=30)
        self.base_entry.grid(row=0, column=1, padx=6, pady=2)

        tk.Label(top, text="Exponent (y)", underline=10).grid(row=1, column=0, sticky="w")
        self.exponent_entry = tk.Entry(top, textvariable=self.exponent_var, width=30)
        self.exponent_entry.grid(row=1, column=1, padx=6, pady=2)
        self._default_bg = self.base_entry.cget("highlightbackground")

        buttons = tk.Frame(self)
        buttons.pack(pady=6)
        self.calculate_button = tk.Button(buttons, text="Calculate", command=self._calculate)
        self.calculate_button.pack(side=tk.LEFT, padx=4)
        tk.Button(buttons, text="Clear", command=self._clear).pack(side=tk.LEFT, padx=4)

        tk.Label(self, textvariable=self.result_var, font=("TkDefaultFont", 12, "bold")).pack(anchor="w", padx=10)
        tk.Label(self, textvariable=self.error_var, fg=ERROR_COLOR, wraplength=480, justify=tk.LEFT).pack(
            anchor="w", padx=10
        )

        self.bind("<Return>", lambda _e: self._calculate_if_enabled())
        self.bind("<Escape>", lambda _e: self._clear())
        self.bind("<Alt-x>", lambda _e: self.base_entry.focus_set())
        self.bind("<Alt-y>", lambda _e: self.exponent_entry.focus_set())
        self.base_entry.focus_set()

    def _mark(self, entry, invalid):
        color = ERROR_COLOR if invalid else self._default_bg
        entry.configure(highlightbackground=color, highlightcolor=color, highlightthickness=1)

    def _update_validation(self):
        state = validate_fields(self.base_var.get(), self.exponent_var.get())
        self.error_var.set(state.message)
        self._mark(self.base_entry, FIELD_BASE in state.invalid_fields)
        self._mark(self.exponent_entry, FIELD_EXPONENT in state.invalid_fields)
        self.calculate_button.configure(state=tk.NORMAL if state.can_calculate else tk.DISABLED)

    def _calculate_if_enabled(self):
        if str(self.calculate_button.cget("state")) == tk.NORMAL:
            self._calculate()

    def _calculate(self):
        self.result_var.set("Calculating...")
        self.error_var.set("")
        try:
            shown = calculate_display(self.base_var.get(), self.exponent_var.get(), self.config_)
        except Exception as exc:
            print(f"power_calculator_gui unexpected error: {exc!r}", file=sys.stderr)
            self.result_var.set("Result: Unexpected Error")
            self.error_var.set("An unexpected error occurred. Please try again.")
            return
        self.result_var.set(shown.text)
        self.error_var.set(shown.error)

    def _clear(self):
        self.base_var.set("")
        self.exponent_var.set("")
        self.result_var.set(IDLE_TEXT)
        self.error_var.set("")
        self.base_entry.focus_set()


if __name__ == "__main__":
    try:
        App().mainloop()
    except Exception as exc:
        messagebox.showerror("Error", str(exc))
