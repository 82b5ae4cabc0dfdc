from setuptools import setup, find_packages

# Setting up
setup(
        name="python_lab_screenshot",
        version='0.0.1',
        description='Grab screenshots from lab instruments such as oscilloscopes',
        packages=find_packages(where='src'),
        package_dir = {"": "src"},
        python_requires='>=3.7',
        install_requires=['Pillow >=9.0.0',
                          'python-usbtmc >=0.8',
                          'python-vxi11 >=0.9',
                          'pyusb >=1.2.1'],
        extras_require={'test': ['pytest >=7.0']},
        entry_points={
            'console_scripts': [
                'lab-screenshot = python_lab_screenshot.script.screenshot:main',
            ],
        },
)
