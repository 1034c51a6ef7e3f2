import setuptools

with open('README.md') as f:
    data = f.read()

setuptools.setup(
    name='pyecrecover',
    version='0.1.0',
    license='MIT',
    author='Mohanson',
    author_email='mohanson@outlook.com',
    description='Recover secp256k1 ECDSA public keys from signatures',
    packages=['pyecrecover'],
    long_description=data,
    long_description_content_type='text/markdown',
    python_requires='>=3.11',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
)
