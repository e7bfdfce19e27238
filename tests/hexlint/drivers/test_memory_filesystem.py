"""Tests for the in-memory output filesystem."""

import pytest

from hexlint.drivers.filesystem.memory import InMemoryOutputFileSystem


@pytest.fixture
def fs() -> InMemoryOutputFileSystem:
    return InMemoryOutputFileSystem()


@pytest.mark.asyncio
async def test_write_and_read(fs: InMemoryOutputFileSystem) -> None:
    await fs.awrite_file("/report.txt", "ok")
    assert fs.files == {"/report.txt": b"ok"}
    assert fs.read_text("/report.txt") == "ok"


@pytest.mark.asyncio
async def test_write_bytes_verbatim(fs: InMemoryOutputFileSystem) -> None:
    await fs.awrite_file("/report.bin", b"\x00\x01")
    assert fs.files["/report.bin"] == b"\x00\x01"


@pytest.mark.asyncio
async def test_write_requires_parent(fs: InMemoryOutputFileSystem) -> None:
    with pytest.raises(FileNotFoundError):
        await fs.awrite_file("/reports/lint.txt", "x")


@pytest.mark.asyncio
async def test_write_to_directory_fails(fs: InMemoryOutputFileSystem) -> None:
    await fs.amkdir("/reports")
    with pytest.raises(IsADirectoryError):
        await fs.awrite_file("/reports", "x")


@pytest.mark.asyncio
async def test_recursive_mkdir_creates_parents(fs: InMemoryOutputFileSystem) -> None:
    await fs.amkdir("/out/reports/lint", recursive=True)
    assert {"/out", "/out/reports", "/out/reports/lint"} <= fs.directories

    await fs.amkdir("/out/reports", recursive=True)
    await fs.awrite_file("/out/reports/lint/a.txt", "a")
    assert fs.read_text("/out/reports/lint/a.txt") == "a"


@pytest.mark.asyncio
async def test_plain_mkdir_requires_parent(fs: InMemoryOutputFileSystem) -> None:
    with pytest.raises(FileNotFoundError):
        await fs.amkdir("/out/reports")


@pytest.mark.asyncio
async def test_plain_mkdir_existing_fails(fs: InMemoryOutputFileSystem) -> None:
    await fs.amkdir("/out")
    with pytest.raises(FileExistsError):
        await fs.amkdir("/out")


@pytest.mark.asyncio
async def test_mkdir_over_file_fails(fs: InMemoryOutputFileSystem) -> None:
    await fs.awrite_file("/out", "x")
    with pytest.raises(FileExistsError):
        await fs.amkdir("/out", recursive=True)


@pytest.mark.asyncio
async def test_paths_are_normalized(fs: InMemoryOutputFileSystem) -> None:
    await fs.amkdir("/out/./reports/", recursive=True)
    await fs.awrite_file("/out/reports/../reports/a.txt", "a")
    assert "/out/reports/a.txt" in fs.files


@pytest.mark.asyncio
async def test_relative_paths(fs: InMemoryOutputFileSystem) -> None:
    await fs.amkdir("out/reports", recursive=True)
    await fs.awrite_file("out/reports/lint.txt", "x")
    await fs.awrite_file("top.txt", "y")

    assert {"out", "out/reports"} <= fs.directories
    assert fs.read_text("out/reports/lint.txt") == "x"
    assert fs.read_text("./top.txt") == "y"


@pytest.mark.asyncio
async def test_plain_mkdir_relative_top_level(fs: InMemoryOutputFileSystem) -> None:
    await fs.amkdir("out")
    assert "out" in fs.directories
