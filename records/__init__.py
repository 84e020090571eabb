"""Records application for the MediTrack backend.

This package holds the entity schemas, the local fallback store, the
remote store client and the synchronization layer that decides which of
the two stores serves each read and receives each write.
"""
