from setuptools import setup

with open("README.md", 'r') as f:
    long_description = f.read()

setup(
   name='pairenc',
   version='1.0',
   description='Pairing-based identity-based (Boneh-Franklin) and simplified attribute-based encryption over BN254',
   license="GPL",
   long_description=long_description,
   long_description_content_type='text/markdown',
   packages=['pairenc'],  #same as name
   python_requires='>=3.8',
   install_requires=[
        'py_ecc>=6.0',
       ], #external packages as dependencies
   extras_require={
        'test': ['pytest'],
        'bench': ['numpy'],
       },
)
