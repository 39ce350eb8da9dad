"""Photo Slider: galerie HTML défilante générée depuis un dossier d'images.

FR: Paquet utilitaire importé par generate_slider.py.
EN: Helper package imported by generate_slider.py.
"""

from photoslider.config import VERSION as __version__

__all__ = ["__version__"]
