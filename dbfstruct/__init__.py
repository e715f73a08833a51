"""
# dbfstruct

Decoding of the header of dBASE (DBF) files, built on a small declarative
description of binary formats.

A format is described as a Chunk whose class attributes are fields listed in
the same order they appear in the stream; unpack() reads each field in turn,
sizes and counts that depend on fields already read are expressed with
Dependency. Failures are raised as subclasses of DBFStructException carrying
the chain of the fields involved.

The entry point for DBF files is dbfstruct.dbf.parse().
"""
