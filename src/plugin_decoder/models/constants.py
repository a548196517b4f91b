"""Plugin format constants: tags and fixed sizes.

Tags are the 4-character ASCII signatures that open every record and
subrecord. Only the ones decoded here are listed.
"""

# Sizes in bytes
TAG_SIZE = 4

# Record tags
TAG_TES4 = "TES4"
TAG_KYWD = "KYWD"

# TES4 subrecords, in the order they must appear
TAG_HEDR = "HEDR"   # statistics: version, record count, next object id
TAG_CNAM = "CNAM"   # author (TES4) / color (KYWD)
TAG_SNAM = "SNAM"   # description
TAG_MAST = "MAST"   # master file name
TAG_DATA = "DATA"   # 8-byte companion of each MAST
TAG_ONAM = "ONAM"   # overridden form ids
TAG_INTV = "INTV"   # internal version
TAG_INCC = "INCC"   # content change counter

# Shared subrecords
TAG_EDID = "EDID"   # editor id

# Fixed payload widths
MASTER_DATA_SIZE = 8
FORM_ID_SIZE = 4
