import pytest

from services.errors import FileNotFound, NotAFile, PathOutsideRoot, WrongFileType
from services.file_gateway import FileGateway


@pytest.fixture
def gateway(root):
    return FileGateway(root)


def test_resolves_pdf(gateway, root):
    path = gateway.resolve("Clinic/PatientA/scan1.pdf")
    assert path == (root / "Clinic" / "PatientA" / "scan1.pdf").resolve()


def test_extension_is_case_insensitive(gateway, root):
    (root / "Empty" / "UPPER.PDF").write_bytes(b"%PDF")
    assert gateway.resolve("Empty/UPPER.PDF").name == "UPPER.PDF"


def test_missing_file(gateway):
    with pytest.raises(FileNotFound):
        gateway.resolve("Clinic/PatientA/nope.pdf")


def test_directory_is_not_a_file(gateway):
    with pytest.raises(NotAFile):
        gateway.resolve("Clinic/PatientA/Notes")


def test_wrong_extension(gateway):
    with pytest.raises(WrongFileType):
        gateway.resolve("Clinic/PatientA/notes.txt")


def test_parent_traversal_rejected(gateway, root):
    (root.parent / "secret.pdf").write_bytes(b"%PDF")
    with pytest.raises(PathOutsideRoot):
        gateway.resolve("../secret.pdf")


def test_traversal_checked_before_existence(gateway):
    with pytest.raises(PathOutsideRoot):
        gateway.resolve("../../does/not/exist.pdf")


def test_symlink_out_of_root_rejected(gateway, root):
    outside = root.parent / "elsewhere.pdf"
    outside.write_bytes(b"%PDF")
    (root / "link.pdf").symlink_to(outside)
    with pytest.raises(PathOutsideRoot):
        gateway.resolve("link.pdf")


def test_nul_byte_is_not_found(gateway):
    with pytest.raises(FileNotFound):
        gateway.resolve("Clinic/x\x00.pdf")


def test_symlink_loop_is_not_found(gateway, root):
    (root / "loop.pdf").symlink_to(root / "loop.pdf")
    with pytest.raises(FileNotFound):
        gateway.resolve("loop.pdf")
