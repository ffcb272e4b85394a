"""Flask API for the Funko collection."""
