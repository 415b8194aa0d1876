"""pathsync: keep a toolchain's bin directory on the user's PATH.

Edits POSIX shell startup files on Unix and the per-user PATH registry value
on Windows. See `pathsync --help` for details.
"""
