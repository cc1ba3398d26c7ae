import contextlib
import os
import tempfile


SAMPLE_EDS = os.path.join(os.path.dirname(__file__), "sample.eds")

# Smallest file with both mandatory objects
MINIMAL_EDS = """\
[1000]
DefaultValue=0x00000191

[1018]
Sub1=0x00000001
"""


@contextlib.contextmanager
def tmp_eds(content, suffix=".eds", encoding="utf-8"):
    """Write EDS content to a temporary file and yield its path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "test" + suffix)
        with open(path, "w", encoding=encoding) as fp:
            fp.write(content)
        yield path
