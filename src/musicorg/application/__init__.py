"""Application layer: services that wire features together for the UIs."""
