import pytest

from main import create_app

PDF = b"%PDF-1.7\n%Sample content for testing"


@pytest.fixture
def root(tmp_path):
    """A root directory holding one patient folder with a PDF and an empty subfolder."""
    base = tmp_path / "root"
    patient = base / "Clinic" / "PatientA"
    (patient / "Notes").mkdir(parents=True)
    (patient / "scan1.pdf").write_bytes(PDF)
    (patient / "notes.txt").write_text("not a pdf")
    (base / "Empty").mkdir()
    return base


@pytest.fixture
def app(root):
    """Return a Flask app serving the temporary root."""
    app = create_app(root_dir=root)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()
