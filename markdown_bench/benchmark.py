import timeit
from pathlib import Path

from markdown_it import MarkdownIt

TEST_FILE = Path(__file__).resolve().parent.parent / "TEST.md"
ITERATIONS = 1000
LABEL = "markdown-it-py"


class FileAccessError(Exception):
    pass


def create_renderer(linkify=True):
    # js-default mirrors markdown-it's own defaults; linkify needs linkify-it-py
    md = MarkdownIt("js-default", {"linkify": linkify})
    return md.render


def load_document(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"cannot read {path}: {exc}") from exc


def run_benchmark(markdown_text, render, iterations=ITERATIONS, out=None):
    # only the first result is printed; render errors are not caught
    start = timeit.default_timer()
    for i in range(iterations):
        result = render(markdown_text)
        if i == 0:
            print(result, file=out)
    return timeit.default_timer() - start


def format_elapsed(label, seconds):
    return f"{label}: {seconds * 1000:.3f}ms"


def main(path=TEST_FILE, iterations=ITERATIONS, render=None, out=None):
    # read once, before timing and before anything is printed
    markdown_text = load_document(path)
    if render is None:
        render = create_renderer()

    elapsed = run_benchmark(markdown_text, render, iterations, out)
    print(format_elapsed(LABEL, elapsed), file=out)
