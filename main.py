import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "edugamify.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
        workers=1,
    )
