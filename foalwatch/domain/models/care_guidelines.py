from __future__ import annotations

from dataclasses import dataclass

from foalwatch.domain.value_objects.gestation_stage import GestationStage

# Owners start watching for foaling signs from this day
PRE_FOALING_SIGNS_START = 300


@dataclass(frozen=True, slots=True)
class StageGuidelines:
    stage: GestationStage
    day_range: str
    monitoring: tuple[str, ...]
    nutrition: tuple[str, ...]
    exercise: tuple[str, ...]
    risks: tuple[str, ...]
    preparation: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PreFoalingSign:
    name: str
    description: str
    urgency: int  # 1-5, 5 most urgent
    time_to_foal: str


STAGE_GUIDELINES: dict[GestationStage, StageGuidelines] = {
    GestationStage.EARLY: StageGuidelines(
        stage=GestationStage.EARLY,
        day_range="0-114 days",
        monitoring=(
            "Watch for signs of continued estrus or return to heat",
            "Monitor general health and appetite",
            "Check for any vaginal discharge",
            "Observe for signs of colic or discomfort",
        ),
        nutrition=(
            "Maintain regular diet if mare is in good condition",
            "Ensure access to clean, fresh water",
            "Provide high-quality forage",
            "Continue regular mineral supplementation",
        ),
        exercise=(
            "Continue normal exercise routine",
            "Avoid strenuous activities",
            "Allow regular turnout",
        ),
        risks=(
            "Early embryonic death (highest risk first 42 days)",
            "Twin pregnancies",
            "Infections",
        ),
        preparation=(
            "Schedule early pregnancy check (14-16 days)",
            "Plan for follow-up ultrasound (28-30 days)",
            "Consider checking for twins",
        ),
    ),
    GestationStage.MID: StageGuidelines(
        stage=GestationStage.MID,
        day_range="115-225 days",
        monitoring=(
            "Regular body condition scoring",
            "Monitor for any signs of illness",
            "Watch for changes in behavior",
            "Check udder development (shouldn't be significant yet)",
        ),
        nutrition=(
            "Gradually increase feed quality",
            "Ensure adequate protein intake",
            "Maintain proper calcium:phosphorus ratio",
            "Consider adding omega-3 supplements",
        ),
        exercise=(
            "Maintain moderate exercise",
            "Continue daily turnout",
            "Avoid high-intensity work",
        ),
        risks=(
            "Placental issues",
            "Nutritional deficiencies",
            "Stress-related complications",
        ),
        preparation=(
            "Plan vaccination schedule",
            "Consider deworming program",
            "Begin planning for foaling arrangements",
        ),
    ),
    GestationStage.LATE: StageGuidelines(
        stage=GestationStage.LATE,
        day_range="226-310 days",
        monitoring=(
            "Watch for udder development",
            "Monitor body condition closely",
            "Check for edema",
            "Observe fetal movement",
            "Watch for any signs of premature labor",
        ),
        nutrition=(
            "Increase feed quantity (by 30-50%)",
            "Provide high-quality protein",
            "Ensure adequate mineral intake",
            "Consider adding vitamin E supplement",
        ),
        exercise=(
            "Reduce exercise intensity",
            "Maintain light activity",
            "Ensure safe turnout conditions",
        ),
        risks=(
            "Premature labor",
            "Placentitis",
            "Colic",
            "Nutritional imbalances",
        ),
        preparation=(
            "Prepare foaling area",
            "Assemble foaling kit",
            "Review foaling procedures",
            "Have veterinarian contacts ready",
        ),
    ),
    GestationStage.PRE_FOALING: StageGuidelines(
        stage=GestationStage.PRE_FOALING,
        day_range="311-340 days",
        monitoring=(
            "Check udder development twice daily",
            "Monitor for waxing of teats",
            "Watch for relaxation of pelvic ligaments",
            "Observe for restlessness or nesting behavior",
            "Check vulvar area for changes",
            "Monitor temperature twice daily",
        ),
        nutrition=(
            "Maintain increased feed levels",
            "Ensure easy access to fresh water",
            "Consider adding electrolytes",
            "Feed smaller meals more frequently",
        ),
        exercise=(
            "Light hand walking only",
            "Provide safe turnout in small area",
            "Avoid any strenuous activity",
        ),
        risks=(
            "Dystocia (difficult birth)",
            "Red bag delivery",
            "Premature placental separation",
            "Post-foaling complications",
        ),
        preparation=(
            "Have foaling kit ready and accessible",
            "Keep watch schedule organized",
            "Install monitoring cameras if using",
            "Have veterinarian on standby",
            "Prepare mare and foal IDs",
        ),
    ),
}

PRE_FOALING_SIGNS: tuple[PreFoalingSign, ...] = (
    PreFoalingSign(
        name="Udder Development",
        description="Gradual filling of the udder, usually begins 4-6 weeks before foaling",
        urgency=1,
        time_to_foal="4-6 weeks",
    ),
    PreFoalingSign(
        name="Vulvar Relaxation",
        description="Relaxation and lengthening of the vulva",
        urgency=2,
        time_to_foal="1-2 weeks",
    ),
    PreFoalingSign(
        name="Waxing",
        description="Waxy secretions on teat ends",
        urgency=4,
        time_to_foal="12-72 hours",
    ),
    PreFoalingSign(
        name="Milk Dripping",
        description="Active dripping of milk",
        urgency=5,
        time_to_foal="12-24 hours",
    ),
    PreFoalingSign(
        name="Restlessness",
        description="Frequent lying down and getting up, pawing, looking at sides",
        urgency=5,
        time_to_foal="1-4 hours",
    ),
    PreFoalingSign(
        name="Sweating",
        description="Patchy sweating, particularly on neck and flanks",
        urgency=5,
        time_to_foal="1-4 hours",
    ),
)
