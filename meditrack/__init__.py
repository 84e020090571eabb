"""Project configuration package for the MediTrack records backend."""
