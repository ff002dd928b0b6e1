"""SkinConditionCNN — compact convolutional classifier for skin photographs.

Three conv stages followed by a dense head:
  - Conv3x3 -> BatchNorm -> MaxPool, at 32, 64, and 128 channels
  - Flatten -> Dropout(0.5) -> Linear(256) -> ReLU -> Linear(num_classes) -> Softmax

Takes channels-last input of shape (N, 224, 224, 3) in [-1, 1], as produced by
ImagePreprocessor.normalize, and returns class probabilities of shape
(N, num_classes).
"""

import torch
import torch.nn as nn

INPUT_SIZE = 224
INPUT_CHANNELS = 3


class ConvStage(nn.Module):
    """Conv3x3 (same padding) -> ReLU -> BatchNorm -> MaxPool2d(2)."""

    def __init__(self, in_ch, out_ch):
        super().__init__()
        self.conv = nn.Conv2d(in_ch, out_ch, 3, padding=1)
        self.relu = nn.ReLU(inplace=True)
        self.bn = nn.BatchNorm2d(out_ch)
        self.pool = nn.MaxPool2d(2)

    def forward(self, x):
        return self.pool(self.bn(self.relu(self.conv(x))))


class SkinConditionCNN(nn.Module):
    """Classifier over the condition catalog."""

    def __init__(self, num_classes, input_size=INPUT_SIZE, dropout=0.5):
        super().__init__()
        self.num_classes = num_classes
        self.features = nn.Sequential(
            ConvStage(INPUT_CHANNELS, 32),
            ConvStage(32, 64),
            ConvStage(64, 128),
        )
        reduced = input_size // 8
        self.last_channel = 128
        self.classifier = nn.Sequential(
            nn.Flatten(),
            nn.Dropout(dropout),
            nn.Linear(self.last_channel * reduced * reduced, 256),
            nn.ReLU(inplace=True),
            nn.Linear(256, num_classes),
        )

    def forward(self, x):
        # NHWC -> NCHW
        x = x.permute(0, 3, 1, 2).contiguous()
        logits = self.classifier(self.features(x))
        return torch.softmax(logits, dim=1)
