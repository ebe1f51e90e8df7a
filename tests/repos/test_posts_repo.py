import pytest

from blog.exceptions import DirectoryReadError, NotFoundError
from blog.repos import posts_repo
from blog.repos.posts_repo import FilesystemPostsRepo
from tests.conftest import make_post, write_post


def test_list_post_files_returns_markdown_files_sorted(posts_dir):
    write_post(posts_dir, "b-post", make_post())
    write_post(posts_dir, "a-post", make_post())
    (posts_dir / "notes.txt").write_text("ignore me")
    (posts_dir / "drafts.md").mkdir()

    files = FilesystemPostsRepo(posts_dir).list_post_files()

    assert [p.name for p in files] == ["a-post.md", "b-post.md"]


def test_list_post_files_empty_directory(posts_dir):
    assert FilesystemPostsRepo(posts_dir).list_post_files() == []


def test_list_post_files_missing_directory_raises(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(DirectoryReadError) as exc:
        FilesystemPostsRepo(missing).list_post_files()

    assert exc.value.path == missing


def test_list_post_files_rejects_file_path(tmp_path):
    not_a_dir = tmp_path / "posts.md"
    not_a_dir.write_text("x")

    with pytest.raises(DirectoryReadError):
        FilesystemPostsRepo(not_a_dir).list_post_files()


def test_read_post_returns_raw_text(posts_dir):
    text = make_post(title="Raw")
    write_post(posts_dir, "raw", text)

    assert FilesystemPostsRepo(posts_dir).read_post("raw") == text


def test_read_post_missing_raises_not_found(posts_dir):
    with pytest.raises(NotFoundError) as exc:
        FilesystemPostsRepo(posts_dir).read_post("missing")

    assert exc.value.slug == "missing"
    assert isinstance(exc.value.__cause__, OSError)


@pytest.mark.parametrize("slug", ["../secret", "a/b", "a\\b", ".hidden", ""])
def test_read_post_rejects_slugs_outside_directory(tmp_path, slug):
    posts = tmp_path / "posts"
    posts.mkdir()
    (tmp_path / "secret.md").write_text(make_post())

    with pytest.raises(NotFoundError):
        FilesystemPostsRepo(posts).read_post(slug)


def test_read_post_undecodable_file_is_not_found(posts_dir):
    (posts_dir / "binary.md").write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(NotFoundError):
        FilesystemPostsRepo(posts_dir).read_post("binary")


def test_slug_for_strips_extension(posts_dir):
    path = write_post(posts_dir, "hello-world", make_post())
    assert FilesystemPostsRepo.slug_for(path) == "hello-world"


def test_repo_defaults_to_configured_directory(monkeypatch, posts_dir):
    monkeypatch.setattr(posts_repo.settings, "POSTS_DIR", str(posts_dir))

    repo = FilesystemPostsRepo()

    assert repo.posts_dir == posts_dir


def test_read_post_drops_byte_order_mark(posts_dir):
    text = make_post(title="Bom")
    (posts_dir / "bom.md").write_bytes(b"\xef\xbb\xbf" + text.encode("utf-8"))

    assert FilesystemPostsRepo(posts_dir).read_post("bom") == text
