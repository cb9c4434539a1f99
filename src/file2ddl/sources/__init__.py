"""Line sources feeding the analyzer."""

from file2ddl.sources.files import analyze_file, read_lines

__all__ = ["analyze_file", "read_lines"]
