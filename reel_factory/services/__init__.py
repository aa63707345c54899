"""Pipeline stages and the media toolchain they run on."""
