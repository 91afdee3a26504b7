import logging
import time
import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from clipstack.app import ClipStackApp

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "• Copy text normally (Ctrl+C) - it will appear here automatically\n"
    "• Click 'Copy' (or double-click a row) to copy an item back to the clipboard\n"
    "• Use search to filter through your clipboard history\n"
    "• Toggle 'Auto Monitor' to pause/resume clipboard monitoring"
)

EMPTY_HISTORY = "📝 No clipboard history yet.\nCopy something to get started!"
NO_MATCHES = "🔍 No matches found for your search."

# age labels only change once a second
AGE_REFRESH_SECONDS = 1.0


class HistoryWindow:
    """tkinter front end for a ClipStackApp."""

    COLUMNS = ("position", "age", "preview", "chars", "lines")

    def __init__(self, app: ClipStackApp, root: Optional[tk.Tk] = None) -> None:
        self.app = app
        self.root = root or tk.Tk()
        self._rendered: Optional[Tuple[int, str]] = None
        self._rendered_at = 0.0
        self._show_instructions = False

        settings = app.settings
        self.root.title("Clipboard Manager")
        self.root.geometry(f"{settings.window_width}x{settings.window_height}")
        self.root.minsize(settings.min_width, settings.min_height)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self.auto_monitor = tk.BooleanVar(value=app.state.auto_monitor)
        self.search = tk.StringVar(value=app.state.search_term)
        self.search.trace_add("write", self._on_search_changed)
        self.count_text = tk.StringVar()
        self.status_text = tk.StringVar()

        self._build()

    # ---------- layout ----------

    def _build(self) -> None:
        frame = ttk.Frame(self.root, padding=10)
        frame.pack(fill="both", expand=True)
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(5, weight=1)

        ttk.Label(frame, text="📋 Clipboard Manager", font=("TkDefaultFont", 16, "bold")).grid(
            row=0, column=0, sticky="w")

        toolbar = ttk.Frame(frame)
        toolbar.grid(row=1, column=0, sticky="ew", pady=(8, 4))
        ttk.Checkbutton(toolbar, text="Auto Monitor", variable=self.auto_monitor,
                        command=self._on_toggle_monitor).pack(side="left")
        ttk.Separator(toolbar, orient="vertical").pack(side="left", fill="y", padx=8)
        ttk.Button(toolbar, text="🔄 Refresh", command=self._on_refresh).pack(side="left")
        ttk.Button(toolbar, text="🗑️ Clear All", command=self._on_clear).pack(side="left", padx=(4, 0))
        ttk.Separator(toolbar, orient="vertical").pack(side="left", fill="y", padx=8)
        ttk.Label(toolbar, textvariable=self.count_text).pack(side="left")

        search_row = ttk.Frame(frame)
        search_row.grid(row=2, column=0, sticky="ew", pady=4)
        search_row.columnconfigure(1, weight=1)
        ttk.Label(search_row, text="🔍 Search:").grid(row=0, column=0, padx=(0, 6))
        ttk.Entry(search_row, textvariable=self.search).grid(row=0, column=1, sticky="ew")
        ttk.Button(search_row, text="✖", width=3,
                   command=lambda: self.search.set("")).grid(row=0, column=2, padx=(4, 0))

        self.instructions_button = ttk.Button(
            frame, text="ℹ️ Instructions ▸", command=self._toggle_instructions)
        self.instructions_button.grid(row=3, column=0, sticky="w", pady=4)
        self.instructions = ttk.Label(frame, text=INSTRUCTIONS, justify="left")

        list_frame = ttk.Frame(frame)
        list_frame.grid(row=5, column=0, sticky="nsew")
        list_frame.columnconfigure(0, weight=1)
        list_frame.rowconfigure(0, weight=1)

        self.tree = ttk.Treeview(list_frame, columns=self.COLUMNS, show="headings",
                                 selectmode="browse")
        for column, heading, width, stretch in (
            ("position", "#", 40, False),
            ("age", "🕒", 70, False),
            ("preview", "Content", 300, True),
            ("chars", "📏 chars", 70, False),
            ("lines", "📄 lines", 60, False),
        ):
            self.tree.heading(column, text=heading)
            self.tree.column(column, width=width, stretch=stretch,
                             anchor="w" if column == "preview" else "center")
        self.tree.grid(row=0, column=0, sticky="nsew")
        self.tree.bind("<Double-Button-1>", lambda _event: self._on_copy())

        scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=self.tree.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        self.tree.configure(yscrollcommand=scrollbar.set)

        self.empty_label = ttk.Label(list_frame, justify="center", anchor="center")

        actions = ttk.Frame(frame)
        actions.grid(row=6, column=0, sticky="ew", pady=(6, 0))
        ttk.Button(actions, text="📋 Copy", command=self._on_copy).pack(side="right")
        ttk.Label(actions, textvariable=self.status_text).pack(side="left")

    # ---------- event callbacks ----------

    def _on_toggle_monitor(self) -> None:
        self.app.set_auto_monitor(self.auto_monitor.get())
        self._render(force=True)

    def _on_refresh(self) -> None:
        self.app.refresh()
        self._render(force=True)

    def _on_clear(self) -> None:
        self.app.clear_history()
        self._render(force=True)

    def _on_copy(self) -> None:
        selection = self.tree.selection()
        if not selection:
            self.app.state.status = "Select an entry to copy"
        else:
            self.app.copy_entry(selection[0])
        self._render(force=True)

    def _on_search_changed(self, *_args) -> None:
        self.app.set_search(self.search.get())
        self._render(force=True)

    def _toggle_instructions(self) -> None:
        self._show_instructions = not self._show_instructions
        if self._show_instructions:
            self.instructions.grid(row=4, column=0, sticky="w", pady=(0, 6))
            self.instructions_button.configure(text="ℹ️ Instructions ▾")
        else:
            self.instructions.grid_remove()
            self.instructions_button.configure(text="ℹ️ Instructions ▸")

    # ---------- rendering ----------

    def _render(self, force: bool = False) -> None:
        key = (self.app.store.revision, self.app.state.search_term)
        now = time.monotonic()
        if not force and key == self._rendered and now - self._rendered_at < AGE_REFRESH_SECONDS:
            return
        self._rendered = key
        self._rendered_at = now

        selected = self.tree.selection()
        views = self.app.visible_entries()

        self.tree.delete(*self.tree.get_children())
        for view in views:
            self.tree.insert("", "end", iid=view.entry.entry_id, values=(
                f"#{view.position}",
                view.age,
                " ".join(view.preview.split()),
                view.char_count,
                view.line_count,
            ))
        if selected and self.tree.exists(selected[0]):
            self.tree.selection_set(selected[0])

        if views:
            self.empty_label.grid_remove()
        else:
            self.empty_label.configure(
                text=NO_MATCHES if self.app.state.search_term else EMPTY_HISTORY)
            self.empty_label.grid(row=0, column=0)

        self.count_text.set(f"📊 {len(self.app.store)} items")
        self.status_text.set(self.app.state.status)

    def _schedule(self) -> None:
        self._render()
        interval_ms = max(50, int(self.app.settings.poll_interval * 1000))
        self.root.after(interval_ms, self._schedule)

    def run(self) -> None:
        self.app.start()
        self._render(force=True)
        self.root.after(0, self._schedule)
        try:
            self.root.mainloop()
        finally:
            self.app.stop()

    def close(self) -> None:
        logger.info("Closing window")
        self.root.destroy()
