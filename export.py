from datetime import datetime

from fpdf import FPDF

COLUMNS = (
    ("ID", "id", 12),
    ("Bus No", "bus_no", 18),
    ("Route", "route", 35),
    ("Name", "passenger_name", 35),
    ("Date", "date", 22),
    ("Time", "time", 18),
    ("Passengers", "passenger_count", 22),
    ("Vehicle", "vehicle_type", 28),
)


def export_reservations_pdf(reservations, filename=None):
    """Writes the reservations to a PDF table and returns the file name."""
    if not reservations:
        raise ValueError("There are no reservations to export.")

    pdf = FPDF()
    pdf.add_page()

    # Header
    pdf.set_font("Helvetica", 'B', 16)
    pdf.cell(0, 10, "Bus Reservations", border=0, new_x="LMARGIN", new_y="NEXT", align="C")
    pdf.ln(10)

    # Table Header
    pdf.set_font("Helvetica", 'B', 10)
    for header, _, width in COLUMNS:
        pdf.cell(width, 10, header, border=1, align="C")
    pdf.ln()

    # Table Rows
    pdf.set_font("Helvetica", '', 9)
    for reservation in reservations:
        for _, attr, width in COLUMNS:
            pdf.cell(width, 10, str(getattr(reservation, attr)), border=1)
        pdf.ln()

    if filename is None:
        filename = f"reservations_{datetime.now().strftime('%Y%m%d_%H%M%S')}.pdf"
    pdf.output(str(filename))
    return filename
