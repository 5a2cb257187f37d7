"""Models of low-level utilities: integer and float math, wide integers, an LCG, text formatting, bitmaps, boot protocol records, byte buffers, an RTC clock, PS/2 mouse decoding and a heap."""

__version__ = "0.1.0"