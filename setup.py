"""
Metro Routing - Build Script

노선망 최단 경로 탐색 서비스 (FastAPI)
"""

from setuptools import setup, find_packages


setup(
    name='metro-routing',
    version='1.0.0',
    description='Shortest-journey routing over a multi-line metro network with delays and closures',
    long_description='''
    Dijkstra-based routing engine for metro networks where several lines
    share station names. Same-named stations are linked by zero-cost
    transfer edges; travel times can be delayed, replaced, reset, and
    stations can be closed. Served through a FastAPI application.
    ''',
    packages=find_packages(include=['metro_routing', 'metro_routing.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.23.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24.0',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
