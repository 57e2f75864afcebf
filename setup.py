from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="frame-preprocessor",
    version="0.1.0",
    description="カメラフレーム前処理サービス - YUV420SP（NV21）のグレースケール化とガウシアンぼかし",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Frame Preprocessor Team",
    python_requires=">=3.9",
    packages=find_packages(include=["shared", "shared.*", "src", "src.*"]),
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.24.0",
        "fastapi>=0.104.0",
        "uvicorn[standard]>=0.24.0",
        "pydantic>=2.5.0",
        "PyYAML>=6.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.25.0",
            "black>=23.11.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Graphics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
