import tkinter as tk
from tkinter import ttk

# Use ttkbootstrap for modern themes and widgets
import ttkbootstrap as tb
from ttkbootstrap.dialogs import Messagebox
from ttkbootstrap.localization import MessageCatalog
from ttkbootstrap.scrolled import ScrolledText

from config import Config
from display import (
    FORM_FIELDS,
    find_line_containing,
    format_reservations,
    parse_reservation_id,
    reservation_from_form,
    reservation_to_form,
)
from export import export_reservations_pdf


# --- GUI APPLICATION ---
class ReservationApp(tb.Window):
    """Main application window. Shows the login frame, then the reservation frame."""
    def __init__(self, controller, themename=Config.THEME):
        super().__init__(themename=themename)
        self.controller = controller
        self.title("Bus Reservation System")
        self.geometry("1000x650")

        self.style.configure('TLabel', font=('Arial', 11))
        self.style.configure('TButton', font=('Arial', 11))

        self.container = ttk.Frame(self)
        self.container.pack(fill="both", expand=True)
        self.container.rowconfigure(0, weight=1)
        self.container.columnconfigure(0, weight=1)

        self.frames = {}
        for F in (LoginFrame, ReservationFrame):
            frame = F(self.container, self)
            self.frames[F.__name__] = frame
            frame.grid(row=0, column=0, sticky="nsew")

        self.show_frame("LoginFrame")

    def show_frame(self, page_name):
        """Brings the specified frame to the front."""
        frame = self.frames[page_name]
        frame.tkraise()

    def login_success(self):
        self.frames["ReservationFrame"].refresh_reservations()
        self.show_frame("ReservationFrame")

    def logout(self):
        self.show_frame("LoginFrame")


class LoginFrame(ttk.Frame):
    """Login screen with a single configured credential pair."""
    def __init__(self, parent, app):
        super().__init__(parent, padding="20")
        self.app = app

        tb.Label(self, text="Login", font=("Arial", 24, "bold"), bootstyle="primary").pack(pady=20)

        form_frame = ttk.Frame(self)
        form_frame.pack(pady=10)

        tb.Label(form_frame, text="Username:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        self.username_entry = tb.Entry(form_frame, width=30)
        self.username_entry.grid(row=0, column=1, padx=5, pady=5)

        tb.Label(form_frame, text="Password:").grid(row=1, column=0, padx=5, pady=5, sticky="w")
        self.password_entry = tb.Entry(form_frame, show="*", width=30)
        self.password_entry.grid(row=1, column=1, padx=5, pady=5)

        tb.Button(self, text="Login", command=self.login, bootstyle="success").pack(pady=20)

    def login(self):
        username = self.username_entry.get()
        password = self.password_entry.get()

        if not username or not password:
            Messagebox.show_error("Username and password cannot be empty.", "Error")
            return

        if self.app.controller.check_credentials(username, password):
            self.username_entry.delete(0, 'end')
            self.password_entry.delete(0, 'end')
            self.app.login_success()
        else:
            Messagebox.show_error("Invalid username or password.", "Login Failed")


class ReservationFrame(ttk.Frame):
    """Reservation form on the left, reserved buses as text lines on the right."""
    def __init__(self, parent, app):
        super().__init__(parent, padding="10")
        self.app = app
        self.controller = app.controller
        self.editing_id = None
        self.reservations = []

        header_frame = ttk.Frame(self)
        header_frame.pack(fill='x', pady=5)

        tb.Label(header_frame, text="Manual Bus Reservation", font=("Arial", 16), bootstyle="primary").pack(side="left")
        tb.Button(header_frame, text="Logout", command=app.logout, bootstyle="danger").pack(side="right")

        main_pane = tb.PanedWindow(self, orient=tk.HORIZONTAL)
        main_pane.pack(expand=True, fill="both")

        # Left side: reservation form
        form_frame = tb.LabelFrame(main_pane, text="Reservation Details", padding="10", bootstyle="primary")
        main_pane.add(form_frame, weight=1)

        self.entries = {}
        for row, (name, label) in enumerate(FORM_FIELDS):
            tb.Label(form_frame, text=f"{label}:").grid(row=row, column=0, padx=5, pady=4, sticky="w")
            entry = tb.Entry(form_frame, width=28)
            entry.grid(row=row, column=1, padx=5, pady=4, sticky="ew")
            self.entries[name] = entry

        button_frame = ttk.Frame(form_frame)
        button_frame.grid(row=len(FORM_FIELDS), column=0, columnspan=2, pady=10)
        self.submit_button = tb.Button(button_frame, text="Reserve", command=self.submit_reservation, bootstyle="success")
        self.submit_button.pack(side="left", padx=5)
        tb.Button(button_frame, text="Clear", command=self.clear_form, bootstyle="secondary").pack(side="left", padx=5)

        # Right side: reserved buses
        list_frame = tb.LabelFrame(main_pane, text="Reserved Buses", padding="10", bootstyle="info")
        main_pane.add(list_frame, weight=2)

        self.reserved_text = ScrolledText(list_frame, height=20, wrap="none", hbar=True, autohide=True)
        self.reserved_text.pack(expand=True, fill="both")

        action_frame = ttk.Frame(list_frame)
        action_frame.pack(fill="x", pady=5)
        tb.Button(action_frame, text="Edit Selected", command=self.edit_selected, bootstyle="info").pack(side="left", padx=5)
        tb.Button(action_frame, text="Cancel Selected", command=self.cancel_selected, bootstyle="danger").pack(side="left", padx=5)
        tb.Button(action_frame, text="Export to PDF", command=self.export_pdf, bootstyle="primary").pack(side="left", padx=5)
        tb.Button(action_frame, text="Refresh", command=self.refresh_reservations, bootstyle="secondary").pack(side="right", padx=5)

        self.clear_form()

    def form_values(self):
        return {name: entry.get() for name, entry in self.entries.items()}

    def fill_form(self, values):
        for name, entry in self.entries.items():
            entry.delete(0, 'end')
            entry.insert(0, values.get(name, ""))

    def clear_form(self):
        """Resets the form and prefills today's date and the current time."""
        self.editing_id = None
        self.submit_button.config(text="Reserve")
        self.fill_form({
            "date": self.controller.get_current_date(),
            "time": self.controller.get_current_time(),
        })

    def submit_reservation(self):
        """Creates a new reservation, or saves the one being edited."""
        try:
            reservation = reservation_from_form(self.form_values(), self.controller, self.editing_id)
        except ValueError as e:
            Messagebox.show_error(str(e), "Invalid Input")
            return

        if self.editing_id is None:
            message = self.controller.create_reservation(reservation)
            if reservation.id is None:
                Messagebox.show_error(message, "Reservation Failed")
                return
            Messagebox.show_info(message, "Success")
        else:
            if not self.controller.update_reservation(reservation):
                Messagebox.show_error("Update failed. Check the bus number and passenger count.", "Error")
                return
            Messagebox.show_info(f"Reservation #{reservation.id} updated.", "Success")

        self.clear_form()
        self.refresh_reservations()

    def refresh_reservations(self):
        """Re-renders every reservation as one line of text."""
        self.reservations = self.controller.get_all_reservations()
        text = self.reserved_text.text
        text.config(state="normal")
        text.delete("1.0", "end")
        text.insert("1.0", format_reservations(self.reservations))
        text.config(state="disabled")

    def selected_reservation(self):
        """Finds the reservation whose line contains the selected text."""
        text = self.reserved_text.text
        try:
            selection = text.get("sel.first", "sel.last")
        except tk.TclError:
            selection = ""

        line = find_line_containing(text.get("1.0", "end-1c"), selection.strip())
        if line is None:
            Messagebox.show_warning("Please select a reservation in the list.", "No Selection")
            return None

        try:
            reservation_id = parse_reservation_id(line)
        except ValueError:
            Messagebox.show_error("Could not read the reservation number from the selection.", "Error")
            return None

        reservation = next((r for r in self.reservations if r.id == reservation_id), None)
        if reservation is None:
            Messagebox.show_error(f"Reservation #{reservation_id} no longer exists.", "Error")
            self.refresh_reservations()
        return reservation

    def edit_selected(self):
        reservation = self.selected_reservation()
        if reservation is None:
            return
        self.editing_id = reservation.id
        self.fill_form(reservation_to_form(reservation))
        self.submit_button.config(text=f"Update #{reservation.id}")

    def cancel_selected(self):
        reservation = self.selected_reservation()
        if reservation is None:
            return

        answer = Messagebox.yesno(f"Cancel reservation #{reservation.id}?", "Confirm Cancellation")
        if answer != MessageCatalog.translate("Yes"):
            return

        if self.controller.cancel_reservation(reservation.id):
            Messagebox.show_info(f"Reservation #{reservation.id} cancelled.", "Success")
            if self.editing_id == reservation.id:
                self.clear_form()
        else:
            Messagebox.show_error(f"Could not cancel reservation #{reservation.id}.", "Error")
        self.refresh_reservations()

    def export_pdf(self):
        """Exports the listed reservations to a PDF file."""
        if not self.reservations:
            Messagebox.show_warning("There are no reservations to export.", "No Data")
            return
        try:
            filename = export_reservations_pdf(self.reservations)
            Messagebox.show_info(f"Reservations saved as {filename}", "Success")
        except Exception as e:
            Messagebox.show_error(f"Could not save PDF file: {e}", "Error")
