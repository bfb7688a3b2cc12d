# 📄 File: soundcave/modules/media/__init__.py
# 🧭 Purpose (Layman Explanation):
# Takes care of uploaded pictures and audio files and stores them in cloud storage.
# 🧪 Purpose (Technical Summary):
# Media module for validated image and audio uploads to Supabase Storage with image
# metadata persisted in the database.
# 🔗 Dependencies:
# FastAPI, Pillow, supabase, SQLAlchemy
# 🔄 Connected Modules / Calls From:
# soundcave.api.v1.router, catalog audio upload endpoint

__module_name__ = "media"

__all__ = ["__module_name__"]
