"""tkinter presentation layer."""
