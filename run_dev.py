# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn uigen.app:app --reload --host 0.0.0.0 --port 8000`
Set PROVIDER=echo to run without any model credentials.
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "uigen.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
