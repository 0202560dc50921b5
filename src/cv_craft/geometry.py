"""Fixed physical page geometry shared by the documents, renderer and merger.

These numbers must agree everywhere for the web preview and the PDF layers
to line up.
"""

PAGE_WIDTH_MM = 210
PAGE_HEIGHT_MM = 297
SIDEBAR_WIDTH_MM = 84
MAIN_WIDTH_MM = PAGE_WIDTH_MM - SIDEBAR_WIDTH_MM

# A4 at 96 dpi, captured at 2x
VIEWPORT_WIDTH_PX = 794
VIEWPORT_HEIGHT_PX = 1123
DEVICE_SCALE_FACTOR = 2

# A4 in PDF points
PAGE_WIDTH_PT = 595.28
PAGE_HEIGHT_PT = 841.89

# Horizontal padding inside each column when the theme gives none
SIDEBAR_INNER_PADDING_MM = 6
MAIN_INNER_PADDING_MM = 8
