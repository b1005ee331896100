"""Font to Intel Quartus Memory Initialization File (.mif) converter."""

VERSION = '0.1'
