INDIGO = "#5f5fd7"
GRAY = "#8787af"
