"""eshop: JWT auth and small shop resources behind one FastAPI app."""
