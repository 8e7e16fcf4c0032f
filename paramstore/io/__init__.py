"""I/O for paramstore: storage backends and the read/write protocol."""
