import pytest

from listingfs.fs_operations import FSOperations

SAMPLE_LISTING = ["/a/b/c.txt", "/a/c/e.dat", "/a/c/f.mp4"]


@pytest.fixture
def listing_file(tmp_path):
    path = tmp_path / "listing.txt"
    path.write_text("\n".join(SAMPLE_LISTING) + "\n")
    return str(path)


@pytest.fixture
def fs(listing_file):
    return FSOperations(listing_file, content_label="listing.txt")
