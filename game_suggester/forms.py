from flask_wtf import FlaskForm
from wtforms import StringField, FloatField, IntegerField
from wtforms.validators import AnyOf, NumberRange, Optional

from .models import GPU_VENDORS, HardwareProfile, OS_CHOICES


def _lower(value):
    return value.strip().lower() if isinstance(value, str) else value


class SuggestFiltersForm(FlaskForm):
    """Query-string filters for /api/suggest-game. Every field may be left out."""

    class Meta:
        csrf = False

    os = StringField("OS", filters=[_lower], validators=[Optional(), AnyOf(OS_CHOICES)])
    ramGB = FloatField("RAM (GB)", validators=[Optional(), NumberRange(min=0)])
    cores = IntegerField("CPU cores", validators=[Optional(), NumberRange(min=1)])
    cpuGHz = FloatField("CPU clock (GHz)", validators=[Optional(), NumberRange(min=0)])
    gpuVendor = StringField("GPU vendor", filters=[_lower], validators=[Optional(), AnyOf(GPU_VENDORS)])
    vramGB = FloatField("VRAM (GB)", validators=[Optional(), NumberRange(min=0)])
    storageGB = FloatField("Storage (GB)", validators=[Optional(), NumberRange(min=0)])

    def to_profile(self) -> HardwareProfile:
        return HardwareProfile(
            os=self.os.data or None,
            ram_gb=self.ramGB.data,
            cores=self.cores.data,
            cpu_ghz=self.cpuGHz.data,
            gpu_vendor=self.gpuVendor.data or None,
            vram_gb=self.vramGB.data,
            storage_gb=self.storageGB.data,
        )

    def error_message(self) -> str:
        parts = [f"{name}: {'; '.join(errs)}" for name, errs in self.errors.items()]
        return "Invalid filters: " + ", ".join(parts)
