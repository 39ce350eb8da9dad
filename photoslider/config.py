"""Configuration centralisée (constantes du processus).

FR: Noms de dossiers/fichiers et réglages fixes. Rien n'est modifié à l'exécution.
EN: Folder/file names and fixed settings. Nothing here is mutated at run time.
"""

VERSION = "0.1.0"

PAGE_TITLE = "Photo Slider"

IMAGE_FOLDER = "images"
OUTPUT_FILE = "photo.html"
CONFIG_FILE = "photo-slider.config"

ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})

# Durée d'animation par image (secondes)
SECONDS_PER_IMAGE = 5

# "%" dans un nom de fichier -> saut de ligne dans la légende
BREAK_CHAR = "%"
BREAK_MARKER = "<br>"

GOOGLE_FONTS_PRECONNECT = "https://fonts.googleapis.com"
GOOGLE_FONTS_STATIC = "https://fonts.gstatic.com"
CAPTION_FONT_CSS = "https://fonts.googleapis.com/css2?family=Nunito:ital,wght@1,800&display=swap"

# Variables d'environnement
ENV_SEED = "PHOTO_SLIDER_SEED"
ENV_DEBUG = "PHOTO_SLIDER_DEBUG"
