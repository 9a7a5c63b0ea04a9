from .crud_artist import artist
from .crud_tattoo import tattoo

# Usage: `crud.artist.get_artist(store, ...)`, `crud.tattoo.upload_tattoo(...)`
