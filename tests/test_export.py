import pytest

from export import export_reservations_pdf


def test_export_writes_pdf(tmp_path, make_reservation):
    target = tmp_path / "out.pdf"
    reservations = [make_reservation(id=1), make_reservation(id=2, bus_no="40")]

    filename = export_reservations_pdf(reservations, target)

    assert filename == target
    assert target.read_bytes().startswith(b"%PDF")


def test_export_default_filename(tmp_path, monkeypatch, make_reservation):
    monkeypatch.chdir(tmp_path)

    filename = export_reservations_pdf([make_reservation(id=1)])

    assert filename.startswith("reservations_") and filename.endswith(".pdf")
    assert (tmp_path / filename).exists()


def test_export_without_reservations_fails():
    with pytest.raises(ValueError):
        export_reservations_pdf([])
