import hypothesis.strategies
import torch

# float16 and bfloat16 are supported but too coarse for exact-value
# properties.
interpolation_dtypes = hypothesis.strategies.sampled_from(
    [torch.float32, torch.float64]
)


def interpolation_devices() -> hypothesis.strategies.SearchStrategy[str]:
    """Strategy for the devices splines can be built on in this process."""
    devices = ["cpu"]
    if torch.cuda.is_available():
        devices.append("cuda")
    return hypothesis.strategies.sampled_from(devices)
