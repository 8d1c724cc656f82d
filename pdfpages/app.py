#!/usr/bin/env python3
"""
PDF Pages Desktop Application
Remove or extract pages from a PDF with visual page thumbnails, or merge
several PDFs into one. Everything runs locally.
"""

import tkinter as tk
from tkinter import ttk, filedialog, messagebox
import logging
import threading
from pathlib import Path

from PIL import ImageTk

from .config import settings
from .errors import DecodeError
from .saving import (
    PDF_FILETYPES,
    SaveCoordinator,
    SaveState,
    TkFileDialogProvider,
    run_in_thread,
)
from .session import EditorSession, MergeSession

logger = logging.getLogger(__name__)


class PdfPagesApp:
    # UI Constants
    FONT_FAMILY = 'Segoe UI'
    STYLE_SUBTITLE = 'Subtitle.TLabel'
    STYLE_ACCENT_BUTTON = 'Accent.TButton'
    THUMBNAIL_CELL_PADDING = 30

    # Event constants
    EVENT_BUTTON_1 = '<Button-1>'
    EVENT_CONFIGURE = '<Configure>'
    EVENT_MOUSE_WHEEL = '<MouseWheel>'
    EVENT_BUTTON_4 = '<Button-4>'
    EVENT_BUTTON_5 = '<Button-5>'

    # User-facing messages
    MSG_READ_FAILED = "Could not read the PDF file. It may be corrupt or password-protected."
    MSG_MERGE_FAILED = "Could not merge the PDF files."

    def __init__(self, root):
        self.root = root
        self.root.title("PDF Pages - Remove, Extract & Merge")
        self.root.geometry("1200x800")
        self.root.minsize(900, 600)

        # App state
        self.session = EditorSession()
        self.merge_session = MergeSession()
        self.coordinator = SaveCoordinator(provider=TkFileDialogProvider(root))
        self.is_processing = False

        self.page_photos = []  # Keep PhotoImage references alive
        self.page_widgets = []
        self.drag_index = None  # Merge list drag source

        self.colors = {
            'normal': '#FFFFFF',
            'selected': '#FFB6C1',
        }

        # Setup GUI
        self.setup_styles()
        self.create_widgets()
        self.create_menu()
        self.update_controls()

    def setup_styles(self):
        """Configure modern styling"""
        style = ttk.Style()
        style.theme_use('clam')

        style.configure('Title.TLabel', font=(self.FONT_FAMILY, 18, 'bold'))
        style.configure(self.STYLE_SUBTITLE, font=(self.FONT_FAMILY, 11))
        style.configure(self.STYLE_ACCENT_BUTTON, font=(self.FONT_FAMILY, 10, 'bold'))

    def create_menu(self):
        """Create application menu"""
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="Open PDF...", command=self.load_pdf, accelerator="Ctrl+O")
        file_menu.add_command(label="Add PDFs to Merge...", command=self.add_merge_files, accelerator="Ctrl+M")
        file_menu.add_separator()
        file_menu.add_command(label="Start Over", command=self.reset_app, accelerator="Ctrl+R")
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.root.quit, accelerator="Ctrl+Q")

        edit_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Edit", menu=edit_menu)
        edit_menu.add_command(label="Clear Selection", command=self.clear_selection)
        edit_menu.add_command(label="Remove Selected Pages...",
                              command=lambda: self.open_save_dialog('remove'), accelerator="Ctrl+S")
        edit_menu.add_command(label="Extract Selected Pages...",
                              command=lambda: self.open_save_dialog('extract'), accelerator="Ctrl+E")

        # Keyboard shortcuts
        self.root.bind('<Control-o>', lambda e: self.load_pdf())
        self.root.bind('<Control-m>', lambda e: self.add_merge_files())
        self.root.bind('<Control-r>', lambda e: self.reset_app())
        self.root.bind('<Control-q>', lambda e: self.root.quit())
        self.root.bind('<Control-s>', lambda e: self.open_save_dialog('remove'))
        self.root.bind('<Control-e>', lambda e: self.open_save_dialog('extract'))

    def create_widgets(self):
        """Create main application widgets"""
        main_frame = ttk.Frame(self.root, padding="10")
        main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(1, weight=1)

        header_frame = ttk.Frame(main_frame)
        header_frame.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=(0, 10))
        header_frame.columnconfigure(0, weight=1)
        ttk.Label(header_frame, text="PDF Pages", style='Title.TLabel').grid(row=0, column=0, sticky=tk.W)
        ttk.Label(header_frame, text="Simple, fast and local. Your files never leave this computer.",
                  style=self.STYLE_SUBTITLE).grid(row=1, column=0, sticky=tk.W)

        self.notebook = ttk.Notebook(main_frame)
        self.notebook.grid(row=1, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        editor_tab = ttk.Frame(self.notebook, padding="5")
        merge_tab = ttk.Frame(self.notebook, padding="5")
        self.notebook.add(editor_tab, text="Remove / Extract Pages")
        self.notebook.add(merge_tab, text="Merge PDFs")

        self.create_editor_tab(editor_tab)
        self.create_merge_tab(merge_tab)

        # Status bar
        self.status_var = tk.StringVar(value="Open a PDF to get started")
        ttk.Label(main_frame, textvariable=self.status_var).grid(row=2, column=0, sticky=tk.W, pady=(8, 0))

        # Progress bar (initially hidden)
        self.progress_var = tk.DoubleVar()
        self.progress_bar = ttk.Progressbar(main_frame, variable=self.progress_var,
                                            maximum=100, mode='determinate')

    # ===== REMOVE / EXTRACT WORKFLOW =====

    def create_editor_tab(self, parent):
        """Create toolbar and thumbnail grid for the single-document workflow"""
        parent.columnconfigure(0, weight=1)
        parent.rowconfigure(1, weight=1)

        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=(0, 5))

        self.open_btn = ttk.Button(toolbar, text="Open PDF...", command=self.load_pdf)
        self.open_btn.pack(side=tk.LEFT)
        self.reset_btn = ttk.Button(toolbar, text="Start Over", command=self.reset_app)
        self.reset_btn.pack(side=tk.LEFT, padx=(5, 0))
        self.clear_btn = ttk.Button(toolbar, text="Clear Selection", command=self.clear_selection)
        self.clear_btn.pack(side=tk.LEFT, padx=(5, 0))

        self.extract_btn = ttk.Button(toolbar, text="Extract Selected...",
                                      command=lambda: self.open_save_dialog('extract'))
        self.extract_btn.pack(side=tk.RIGHT)
        self.remove_btn = ttk.Button(toolbar, text="Remove Selected...", style=self.STYLE_ACCENT_BUTTON,
                                     command=lambda: self.open_save_dialog('remove'))
        self.remove_btn.pack(side=tk.RIGHT, padx=(0, 5))

        self.file_label = ttk.Label(toolbar, text="No file loaded", style=self.STYLE_SUBTITLE)
        self.file_label.pack(side=tk.LEFT, padx=(15, 0))

        canvas_frame = ttk.Frame(parent)
        canvas_frame.grid(row=1, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))
        canvas_frame.columnconfigure(0, weight=1)
        canvas_frame.rowconfigure(0, weight=1)

        self.canvas = tk.Canvas(canvas_frame, bg='white', highlightthickness=0)
        scrollbar_v = ttk.Scrollbar(canvas_frame, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar_v.set)
        self.canvas.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))
        scrollbar_v.grid(row=0, column=1, sticky=(tk.N, tk.S))

        self.thumbnails_frame = tk.Frame(self.canvas, bg='white')
        self.canvas_window = self.canvas.create_window((0, 0), window=self.thumbnails_frame, anchor=tk.NW)

        self.canvas.bind(self.EVENT_CONFIGURE, self.on_canvas_configure)
        self.thumbnails_frame.bind(self.EVENT_CONFIGURE, self.on_frame_configure)
        for widget in (self.canvas, self.thumbnails_frame):
            widget.bind(self.EVENT_MOUSE_WHEEL, self.on_mousewheel)
            widget.bind(self.EVENT_BUTTON_4, self.on_mousewheel)  # Linux
            widget.bind(self.EVENT_BUTTON_5, self.on_mousewheel)  # Linux

    def load_pdf(self):
        """Pick a PDF and generate its thumbnails in the background"""
        if self.is_processing:
            return

        file_path = filedialog.askopenfilename(title="Select PDF File", filetypes=PDF_FILETYPES)
        if not file_path:
            return

        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            messagebox.showerror("Error", self.MSG_READ_FAILED)
            return

        self.clear_thumbnails()
        self.session.reset()
        self.notebook.select(0)
        self.set_processing(True)
        self.show_progress(0)
        self.status_var.set("Loading pages...")

        file_name = Path(file_path).name
        threading.Thread(target=self.generate_thumbnails, args=(file_name, data), daemon=True).start()

    def generate_thumbnails(self, file_name, data):
        """Worker thread: decode every page, reporting progress to the UI"""
        def on_progress(done, total):
            self.root.after(0, lambda p=self.session.progress, d=done, t=total: self.show_progress(
                p, f"Loading pages... {d}/{t}"))

        try:
            self.session.load(file_name, data, on_progress)
        except DecodeError:
            self.root.after(0, self.on_load_failed)
            return

        self.root.after(0, self.on_load_finished)

    def on_load_finished(self):
        self.hide_progress()
        self.set_processing(False)
        self.display_thumbnails()
        self.status_var.set(f"Ready - {self.session.total_pages} pages loaded. "
                            "Click to select, Shift+click to select a range.")

    def on_load_failed(self):
        self.hide_progress()
        self.set_processing(False)
        self.reset_app()
        messagebox.showerror("Error", self.MSG_READ_FAILED)

    def display_thumbnails(self):
        """Lay out thumbnails in a grid sized to the canvas"""
        self.clear_thumbnails()
        if not self.session.thumbnails:
            return

        canvas_width = self.canvas.winfo_width()
        if canvas_width <= 1:
            self.root.after(100, self.display_thumbnails)  # Retry when canvas is ready
            return

        widest = max(t.width for t in self.session.thumbnails)
        cols = max(1, canvas_width // (widest + self.THUMBNAIL_CELL_PADDING))

        for thumb in self.session.thumbnails:
            photo = ImageTk.PhotoImage(thumb.to_image())
            self.page_photos.append(photo)

            row, col = divmod(thumb.index, cols)
            thumb_frame = tk.Frame(self.thumbnails_frame, relief=tk.RAISED, borderwidth=2,
                                   bg=self.colors['normal'], cursor='hand2')
            thumb_frame.grid(row=row, column=col, padx=5, pady=5, sticky=tk.N)

            page_label = tk.Label(thumb_frame, text=f"Page {thumb.index + 1}",
                                  font=(self.FONT_FAMILY, 9, 'bold'), bg=self.colors['normal'])
            page_label.pack(pady=(5, 1))
            thumb_label = tk.Label(thumb_frame, image=photo, bg=self.colors['normal'])
            thumb_label.pack(padx=4, pady=(0, 4))

            self.page_widgets.append({'frame': thumb_frame, 'page_label': page_label, 'thumb_label': thumb_label})

            for widget in (thumb_frame, page_label, thumb_label):
                widget.bind(self.EVENT_BUTTON_1, lambda e, idx=thumb.index: self.on_page_click(e, idx))
                widget.bind(self.EVENT_MOUSE_WHEEL, self.on_mousewheel)
                widget.bind(self.EVENT_BUTTON_4, self.on_mousewheel)
                widget.bind(self.EVENT_BUTTON_5, self.on_mousewheel)

        self.thumbnails_frame.update_idletasks()
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))
        self.update_selection_display()

    def clear_thumbnails(self):
        for widget in self.thumbnails_frame.winfo_children():
            widget.destroy()
        self.page_widgets.clear()
        self.page_photos.clear()

    def on_page_click(self, event, page_index):
        """Toggle a page; Shift extends from the last clicked page"""
        if self.is_processing:
            return
        shift_held = bool(event.state & 0x1)
        self.session.toggle_page(page_index, extend=shift_held)
        self.update_selection_display()

    def update_selection_display(self):
        """Update visual selection indicators"""
        for index, widget in enumerate(self.page_widgets):
            if index in self.session.selection:
                color, border, relief = self.colors['selected'], 3, tk.SOLID
            else:
                color, border, relief = self.colors['normal'], 2, tk.RAISED
            widget['frame'].config(bg=color, borderwidth=border, relief=relief)
            widget['page_label'].config(bg=color)
            widget['thumb_label'].config(bg=color)

        if self.session.loaded:
            self.file_label.config(
                text=f"{self.session.file_name} - {self.session.total_pages} pages, "
                     f"{len(self.session.selection)} selected")
        else:
            self.file_label.config(text="No file loaded")
        self.update_controls()

    def clear_selection(self):
        self.session.clear_selection()
        self.update_selection_display()

    def on_canvas_configure(self, event):
        """Handle canvas resize"""
        self.canvas.itemconfig(self.canvas_window, width=event.width)
        if self.page_widgets:
            self.root.after(100, self.display_thumbnails)

    def on_frame_configure(self, event):
        """Handle thumbnails frame resize"""
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def on_mousewheel(self, event):
        """Handle mouse wheel scrolling"""
        if event.delta:
            # Windows and MacOS
            delta = -1 * (event.delta / 120)
        elif event.num == 4:
            delta = -1
        elif event.num == 5:
            delta = 1
        else:
            return
        self.canvas.yview_scroll(int(delta * 3), "units")

    # ===== MERGE WORKFLOW =====

    def create_merge_tab(self, parent):
        """Create the ordered file list for merging"""
        parent.columnconfigure(0, weight=1)
        parent.rowconfigure(1, weight=1)

        ttk.Label(parent, text="Add two or more PDF files and combine them into one document. "
                               "Drag to reorder.", style=self.STYLE_SUBTITLE).grid(row=0, column=0, sticky=tk.W,
                                                                                    pady=(0, 5))

        list_frame = ttk.Frame(parent)
        list_frame.grid(row=1, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))
        list_frame.columnconfigure(0, weight=1)
        list_frame.rowconfigure(0, weight=1)

        self.merge_listbox = tk.Listbox(list_frame, font=(self.FONT_FAMILY, 10), activestyle='none')
        merge_scroll = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.merge_listbox.yview)
        self.merge_listbox.configure(yscrollcommand=merge_scroll.set)
        self.merge_listbox.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))
        merge_scroll.grid(row=0, column=1, sticky=(tk.N, tk.S))

        self.merge_listbox.bind(self.EVENT_BUTTON_1, self.start_merge_drag)
        self.merge_listbox.bind('<B1-Motion>', self.on_merge_drag)
        self.merge_listbox.bind('<ButtonRelease-1>', self.end_merge_drag)

        controls = ttk.Frame(parent)
        controls.grid(row=2, column=0, sticky=(tk.W, tk.E), pady=(5, 0))

        self.add_merge_btn = ttk.Button(controls, text="Add PDFs...", command=self.add_merge_files)
        self.add_merge_btn.pack(side=tk.LEFT)
        self.remove_merge_btn = ttk.Button(controls, text="Remove", command=self.remove_merge_file)
        self.remove_merge_btn.pack(side=tk.LEFT, padx=(5, 0))
        self.up_merge_btn = ttk.Button(controls, text="Move Up", command=lambda: self.shift_merge_file(-1))
        self.up_merge_btn.pack(side=tk.LEFT, padx=(5, 0))
        self.down_merge_btn = ttk.Button(controls, text="Move Down", command=lambda: self.shift_merge_file(1))
        self.down_merge_btn.pack(side=tk.LEFT, padx=(5, 0))

        self.merge_btn = ttk.Button(controls, text="Merge PDFs...", style=self.STYLE_ACCENT_BUTTON,
                                    command=lambda: self.open_save_dialog('merge'))
        self.merge_btn.pack(side=tk.RIGHT)
        self.merge_count_var = tk.StringVar(value="0 files")
        ttk.Label(controls, textvariable=self.merge_count_var).pack(side=tk.RIGHT, padx=(0, 10))

    def add_merge_files(self):
        if self.is_processing:
            return

        file_paths = filedialog.askopenfilenames(title="Select PDF Files", filetypes=PDF_FILETYPES)
        for file_path in file_paths:
            try:
                self.merge_session.sources.add_file(file_path)
            except OSError as e:
                logger.error(f"Failed to read {file_path}: {e}")
                messagebox.showerror("Error", f"Could not read {Path(file_path).name}.")

        self.notebook.select(1)
        self.refresh_merge_list()

    def remove_merge_file(self):
        selection = self.merge_listbox.curselection()
        if not selection:
            return
        source = self.merge_session.sources.sources[selection[0]]
        self.merge_session.sources.remove(source.id)
        self.refresh_merge_list()

    def shift_merge_file(self, offset):
        selection = self.merge_listbox.curselection()
        if not selection:
            return
        from_index = selection[0]
        to_index = from_index + offset
        if not 0 <= to_index < len(self.merge_session.sources):
            return
        self.merge_session.sources.move(from_index, to_index)
        self.refresh_merge_list(select=to_index)

    def start_merge_drag(self, event):
        self.drag_index = self.merge_listbox.nearest(event.y)

    def on_merge_drag(self, event):
        """Move the dragged entry as soon as it enters another row"""
        if self.drag_index is None or self.is_processing:
            return
        target = self.merge_listbox.nearest(event.y)
        if target == self.drag_index or not 0 <= target < len(self.merge_session.sources):
            return
        self.merge_session.sources.move(self.drag_index, target)
        self.drag_index = target
        self.refresh_merge_list(select=target)

    def end_merge_drag(self, event):
        self.drag_index = None

    def refresh_merge_list(self, select=None):
        self.merge_listbox.delete(0, tk.END)
        for position, source in enumerate(self.merge_session.sources, start=1):
            pages = f"{source.page_count} pages" if source.page_count is not None else "unreadable"
            self.merge_listbox.insert(tk.END, f"{position}. {source.name} ({pages})")

        if select is not None:
            self.merge_listbox.selection_set(select)

        count = len(self.merge_session.sources)
        self.merge_count_var.set(f"{count} file{'s' if count != 1 else ''}, "
                                 f"{self.merge_session.sources.total_pages()} pages")
        self.update_controls()

    # ===== SAVE =====

    def open_save_dialog(self, action):
        """Ask for the output name, then start the save"""
        if self.is_processing:
            return
        if action == 'merge':
            if not self.merge_session.can_merge():
                return
            default_name = self.merge_session.output_filename
        else:
            if not self.session.loaded or not len(self.session.selection):
                return
            default_name = self.session.output_filename

        dialog = tk.Toplevel(self.root)
        dialog.title("Save File")
        dialog.resizable(False, False)
        dialog.transient(self.root)
        dialog.grab_set()

        main_frame = ttk.Frame(dialog, padding="20")
        main_frame.pack(fill=tk.BOTH, expand=True)

        ttk.Label(main_frame, text="Save File", font=(self.FONT_FAMILY, 12, "bold")).pack(anchor=tk.W)
        ttk.Label(main_frame, text="Choose the file name and where to save it.").pack(anchor=tk.W, pady=(0, 15))

        input_frame = ttk.Frame(main_frame)
        input_frame.pack(fill=tk.X)
        name_entry = ttk.Entry(input_frame, font=(self.FONT_FAMILY, 10), width=40)
        name_entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        name_entry.insert(0, default_name)
        ttk.Label(input_frame, text=".pdf", font=(self.FONT_FAMILY, 10)).pack(side=tk.LEFT, padx=(5, 0))
        name_entry.focus_set()
        name_entry.select_range(0, tk.END)

        # Capability is checked every time the dialog opens
        if self.coordinator.supports_native_save():
            confirm_text = "Choose Location and Save"
        else:
            confirm_text = "Download File"

        def on_confirm():
            filename = name_entry.get().strip()
            if not filename:
                return
            dialog.destroy()
            self.confirm_save(action, filename)

        button_frame = ttk.Frame(main_frame)
        button_frame.pack(fill=tk.X, pady=(20, 0))
        ttk.Button(button_frame, text="Cancel", command=dialog.destroy).pack(side=tk.RIGHT, padx=(5, 0))
        ttk.Button(button_frame, text=confirm_text, command=on_confirm,
                   style=self.STYLE_ACCENT_BUTTON).pack(side=tk.RIGHT)

        dialog.bind('<Return>', lambda e: on_confirm())
        dialog.bind('<Escape>', lambda e: dialog.destroy())

    def confirm_save(self, action, filename):
        """
        Start the save from the confirm click.

        The save location is requested first, on this callback; the
        mutation then runs on a worker thread.
        """
        if action == 'merge':
            self.merge_session.output_filename = filename
            payloads = self.merge_session.sources.payloads()
            produce = lambda: self.merge_session.merged_bytes(payloads)
        else:
            self.session.output_filename = filename
            indices = self.session.selection.selected()
            if action == 'remove':
                produce = lambda: self.session.removal_bytes(indices)
            else:
                produce = lambda: self.session.extraction_bytes(indices)

        def on_finished(result):
            self.root.after(0, lambda: self.on_save_finished(action, result))

        handed_off = self.coordinator.save(
            filename, produce, run_in_background=run_in_thread, on_finished=on_finished
        ) is None

        if handed_off:
            self.set_processing(True)
            self.status_var.set("Processing...")

    def on_save_finished(self, action, result):
        self.set_processing(False)

        if result.status == SaveState.CANCELLED:
            self.status_var.set("Save cancelled")
            return

        if not result.ok:
            self.status_var.set("Error saving PDF")
            messagebox.showerror("Error", self.MSG_MERGE_FAILED if action == 'merge' else result.message)
            return

        self.status_var.set(f"Saved {result.path.name}")
        messagebox.showinfo("Success", f"PDF saved successfully!\n\nSaved to:\n{result.path}")

        if action == 'merge':
            self.merge_session.reset()
            self.refresh_merge_list()

    # ===== STATE =====

    def set_processing(self, processing):
        self.is_processing = processing
        self.update_controls()

    def update_controls(self):
        """Enable buttons that make sense in the current state"""
        def state(enabled):
            return tk.NORMAL if enabled and not self.is_processing else tk.DISABLED

        has_selection = self.session.loaded and len(self.session.selection) > 0
        self.open_btn.config(state=state(True))
        self.reset_btn.config(state=state(self.session.loaded))
        self.clear_btn.config(state=state(has_selection))
        self.remove_btn.config(state=state(has_selection))
        self.extract_btn.config(state=state(has_selection))

        has_entry = len(self.merge_session.sources) > 0
        self.add_merge_btn.config(state=state(True))
        self.remove_merge_btn.config(state=state(has_entry))
        self.up_merge_btn.config(state=state(has_entry))
        self.down_merge_btn.config(state=state(has_entry))
        self.merge_btn.config(state=state(self.merge_session.can_merge()))

    def show_progress(self, percent, message=None):
        self.progress_bar.grid(row=3, column=0, sticky=(tk.W, tk.E), pady=(5, 0))
        self.progress_var.set(percent)
        if message:
            self.status_var.set(message)

    def hide_progress(self):
        self.progress_bar.grid_remove()

    def reset_app(self):
        """Discard the loaded document and its selection"""
        if self.is_processing:
            return
        self.session.reset()
        self.clear_thumbnails()
        self.update_selection_display()
        self.status_var.set("Open a PDF to get started")


def main():
    """Main application entry point"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root = tk.Tk()
    root.eval('tk::PlaceWindow . center')

    PdfPagesApp(root)

    def on_closing():
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_closing)

    try:
        root.mainloop()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
