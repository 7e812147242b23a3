from .step_01_create_directories import CreateDirectoriesStep
from .step_02_bootstrap_base import BootstrapBaseSystemStep
from .step_03_customize_grub import CustomizeGrubStep
from .step_04_install_desktop import InstallDesktopStep
from .step_05_install_calamares import InstallCalamaresStep
from .step_06_install_software import InstallSoftwareStep
from .step_07_prepare_image_files import PrepareImageFilesStep
from .step_08_boot_structure import CreateBootStructureStep
from .step_09_create_iso import CreateIsoImageStep
from .step_10_cleanup import CleanupStep

__all__ = [
    "CreateDirectoriesStep",
    "BootstrapBaseSystemStep",
    "CustomizeGrubStep",
    "InstallDesktopStep",
    "InstallCalamaresStep",
    "InstallSoftwareStep",
    "PrepareImageFilesStep",
    "CreateBootStructureStep",
    "CreateIsoImageStep",
    "CleanupStep",
]
