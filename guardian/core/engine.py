"""
Guardian Engine
================

Facade over the generators and analyzers. The engine loads the two
process-wide read-only inputs (word list and reference secret set) once,
at construction, and hands them by reference to the components that
need them. Every operation is synchronous and keeps no per-call state,
so one engine may serve concurrent callers.

Usage::

    engine = GuardianEngine()
    secret = engine.generate_password(PasswordRequest(length=20))
    assessment = engine.assess(secret.value)
    tips = engine.advise(secret.value, assessment)
    response = engine.handle("generatePassphrase", {"count": "6", "sep": "."})
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from shared.config import GuardianConfig
from shared.logger import from_config
from shared.models import Finding, ScanResult, Severity

from guardian.analyzers.advice import AdviceEngine
from guardian.analyzers.strength import PATTERN_PENALTY_BITS, EntropyEstimator
from guardian.analyzers.uniformity import UniformityAuditor
from guardian.core.dispatch import RequestDispatcher
from guardian.core.models import (
    ActionResponse,
    CharacterClass,
    GeneratedSecret,
    PassphraseRequest,
    PasswordRequest,
    StrengthAssessment,
    StrengthLabel,
    UniformityResult,
)
from guardian.data.reference import ReferenceSecretSet, load_reference_set
from guardian.data.wordlist import WordList, load_wordlist
from guardian.generators.passphrase import PassphraseComposer
from guardian.generators.password import PasswordComposer
from guardian.generators.pools import PoolBuilder
from guardian.generators.random_source import SecureRandom, Shuffler

_LABEL_SEVERITY: dict[StrengthLabel, Severity] = {
    StrengthLabel.COMPROMISED: Severity.CRITICAL,
    StrengthLabel.VERY_WEAK: Severity.CRITICAL,
    StrengthLabel.WEAK: Severity.HIGH,
    StrengthLabel.FAIR: Severity.MEDIUM,
    StrengthLabel.STRONG: Severity.LOW,
    StrengthLabel.VERY_STRONG: Severity.INFO,
}

_PATTERN_FINDINGS: tuple[tuple[str, str, str], ...] = (
    ("repeated_run", "Repeated Characters", "three or more identical characters in a row"),
    ("numeric_sequence", "Numeric Sequence", "a four-digit ascending run such as 1234"),
    ("keyboard_sequence", "Keyboard Sequence", "a keyboard run such as qwer or asdf"),
)


def mask_secret(secret: str) -> str:
    """First and last character with asterisks in between."""
    if len(secret) <= 2:
        return "*" * len(secret)
    return secret[0] + "*" * (len(secret) - 2) + secret[-1]


class GuardianEngine:
    """Generate secrets and assess their strength.

    Args:
        config: Toolkit configuration; defaults apply when omitted.
        wordlist: Passphrase vocabulary; loaded from config when omitted.
        reference_set: Known-weak secrets; loaded from config when omitted.
        rng: Secure integer source shared by every generator.
    """

    def __init__(
        self,
        config: Optional[GuardianConfig] = None,
        *,
        wordlist: Optional[WordList] = None,
        reference_set: Optional[ReferenceSecretSet] = None,
        rng: Optional[SecureRandom] = None,
    ) -> None:
        self.config = config or GuardianConfig()
        self.logger = from_config("guardian.engine", self.config)

        gen = self.config.generator
        est = self.config.estimator
        self.wordlist = wordlist if wordlist is not None else load_wordlist(gen.wordlist_path)
        self.reference_set = (
            reference_set
            if reference_set is not None
            else load_reference_set(est.reference_set_path)
        )

        rng = rng or SecureRandom()
        self._pool_builder = PoolBuilder(gen.symbol_alphabet)
        self._password_composer = PasswordComposer(self._pool_builder, rng)
        self._passphrase_composer = PassphraseComposer(self.wordlist, rng)
        self._shuffler = Shuffler(rng)
        self._estimator = EntropyEstimator(self.reference_set)
        self._advice = AdviceEngine(est.advice_min_length)
        self._dispatcher = RequestDispatcher(self, gen)

        self.logger.debug(
            "Engine ready",
            words=len(self.wordlist),
            reference_secrets=len(self.reference_set),
        )

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate_password(self, request: PasswordRequest) -> GeneratedSecret:
        """Compose a password; see :class:`PasswordComposer`."""
        with self.logger.operation("generate_password"):
            secret = self._password_composer.generate(request)
            self.logger.info(
                "Password generated",
                length=secret.length,
                classes=",".join(c.value for c in request.ordered_classes),
                exclude_ambiguous=request.exclude_ambiguous,
            )
        return secret

    def generate_passphrase(self, request: PassphraseRequest) -> GeneratedSecret:
        """Compose a passphrase; see :class:`PassphraseComposer`."""
        with self.logger.operation("generate_passphrase"):
            secret = self._passphrase_composer.generate(request)
            self.logger.info("Passphrase generated", words=secret.word_count)
        return secret

    def handle(self, action: str, params: Mapping[str, Any] | None = None) -> ActionResponse:
        """Serve one loosely typed request; see :class:`RequestDispatcher`."""
        response = self._dispatcher.handle(action, params)
        if not response.ok:
            self.logger.warning("Request rejected", action=action, error=response.error)
        return response

    # ------------------------------------------------------------------ #
    #  Assessment
    # ------------------------------------------------------------------ #

    def assess(self, secret: str) -> StrengthAssessment:
        return self._estimator.assess(secret)

    def advise(
        self, secret: str, assessment: Optional[StrengthAssessment] = None
    ) -> list[str]:
        """Ordered remediation tips; assesses *secret* first if needed."""
        if assessment is None:
            assessment = self._estimator.assess(secret)
        return self._advice.advise(secret, assessment)

    def analyze_secret(self, secret: str) -> ScanResult:
        """Assessment and advice for *secret* as a reportable result.

        The result never contains the secret; its metadata carries the
        masked form, the assessment and the tips.
        """
        result = ScanResult(tool_name="guardian", target="[secret]")

        with self.logger.operation("analyze_secret"):
            assessment = self._estimator.assess(secret)
            tips = self._advice.advise(secret, assessment)
            signals = assessment.signals
            self.logger.info(
                "Secret assessed",
                length=signals.length,
                score=assessment.score,
                label=assessment.label.value,
            )

        result.metadata = {
            "masked": mask_secret(secret),
            "assessment": assessment.model_dump(mode="json"),
            "advice": tips,
        }

        result.add_finding(Finding(
            title=f"Strength: {assessment.status_text}",
            description=(
                f"Estimated entropy: {assessment.entropy_bits:.2f} bits. "
                f"Character pool: {signals.pool_size}. "
                f"Length: {signals.length}. Score: {assessment.score}/4."
            ),
            severity=_LABEL_SEVERITY[assessment.label],
            evidence={
                "entropy_bits": round(assessment.entropy_bits, 2),
                "raw_bits": round(signals.raw_bits, 2),
                "pool_size": signals.pool_size,
                "score": assessment.score,
                "label": assessment.label.value,
            },
        ))

        if signals.compromised:
            result.add_finding(Finding(
                title="Known Weak Secret",
                description=(
                    "The secret is on the reference list of common passwords; "
                    "its estimate is capped at 8 bits."
                ),
                severity=Severity.CRITICAL,
                recommendation="Replace it with a generated password or passphrase.",
            ))

        for field_name, title, what in _PATTERN_FINDINGS:
            if getattr(signals, field_name):
                result.add_finding(Finding(
                    title=f"Pattern Detected: {title}",
                    description=(
                        f"The secret contains {what}; the estimate is reduced "
                        f"by {PATTERN_PENALTY_BITS:.0f} bits."
                    ),
                    severity=Severity.LOW,
                ))

        for tip in tips:
            result.add_finding(Finding(
                title="Suggestion",
                description=tip,
                severity=Severity.INFO,
            ))

        return result.finalize(
            f"Strength: {assessment.status_text}, "
            f"entropy={round(assessment.entropy_bits)} bits, score={assessment.score}/4"
        )

    # ------------------------------------------------------------------ #
    #  Uniformity audit
    # ------------------------------------------------------------------ #

    def audit(
        self,
        samples: Optional[int] = None,
        significance: Optional[float] = None,
        shuffle_size: Optional[int] = None,
    ) -> list[UniformityResult]:
        """Chi-squared audits: one per character class, then the shuffle."""
        cfg = self.config.audit
        samples = samples if samples is not None else cfg.samples
        auditor = UniformityAuditor(
            composer=self._password_composer,
            shuffler=self._shuffler,
            pool_builder=self._pool_builder,
            significance=significance if significance is not None else cfg.significance,
        )

        results: list[UniformityResult] = []
        with self.logger.timed(f"uniformity audit ({samples} samples)"):
            for char_class in CharacterClass:
                results.append(auditor.audit_characters(char_class, samples=samples))
            results.append(auditor.audit_shuffle(
                size=shuffle_size if shuffle_size is not None else cfg.shuffle_size,
                samples=samples,
            ))

        for res in results:
            if not res.passed:
                self.logger.warning(
                    "Uniformity audit rejected",
                    test=res.test_name,
                    p_value=res.p_value,
                )
        return results
